# /hostlist/domain/expand_service.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from hostlist.domain.hostspec import HostSpecError, RangeSpec, decompose

LOG = logging.getLogger("expand_service")


class ExpansionError(ValueError):
    """An expression failed to parse; ``position`` says which one."""

    def __init__(self, position: int, error: HostSpecError) -> None:
        super().__init__(f"error at arg {position}: {error}")
        self.position = position
        self.error = error


class ExpandService:
    """Drives decomposition and expansion over an ordered list of expressions."""

    def decompose_all(self, expressions: Iterable[str], start: int = 0) -> Iterator[list[RangeSpec]]:
        for position, raw in enumerate(expressions, start):
            if not raw:
                continue
            try:
                specs = decompose(raw)
            except HostSpecError as e:
                LOG.info(
                    "hostlist.expression.failed",
                    extra={"extra": {"position": position, "kind": e.kind}},
                )
                raise ExpansionError(position, e) from e
            LOG.debug(
                "hostlist.expression.decomposed",
                extra={"extra": {"position": position, "specs": len(specs)}},
            )
            yield specs

    def expand(self, expressions: Iterable[str], start: int = 0) -> Iterator[str]:
        """Yield every host name, in input order, stopping at the first bad expression.

        Empty expressions are skipped but keep their place in the numbering,
        so positions always refer to the caller's sequence (offset by ``start``).
        Hosts from expressions before the failing one are yielded before
        ``ExpansionError`` is raised.
        """
        for specs in self.decompose_all(expressions, start):
            for spec in specs:
                yield from spec
