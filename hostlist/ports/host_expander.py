# /hostlist/ports/host_expander.py
from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol


class HostExpanderPort(Protocol):
    def expand(self, expressions: Iterable[str], start: int = 0) -> Iterator[str]:
        """Lazily expand host-list expressions; raise ExpansionError on the first bad one."""
