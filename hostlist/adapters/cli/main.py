# /hostlist/adapters/cli/main.py
from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from hostlist.adapters.system.logging_cfg import configure_logger
from hostlist.config import settings
from hostlist.domain.expand_service import ExpandService, ExpansionError
from hostlist.ports.host_expander import HostExpanderPort

LOG = logging.getLogger("adapter.cli")


def run(expressions: Sequence[str], expander: HostExpanderPort | None = None) -> int:
    """Print every expanded host to stdout; report the first bad expression on stderr."""
    expander = expander or ExpandService()
    try:
        for host in expander.expand(expressions, start=settings.POSITION_BASE):
            print(host)
    except ExpansionError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Usage: hostlist EXPR...

    Every argument is an expression, including ones starting with '-', so
    reported positions are argv indexes. The log level comes from LOG_LEVEL.
    """
    configure_logger(settings.LOG_LEVEL)
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
