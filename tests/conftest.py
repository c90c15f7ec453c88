# tests/conftest.py
import logging

import pytest

from hostlist.adapters.system.logging_cfg import JSONHandler


@pytest.fixture(autouse=True)
def drop_json_handlers():
    # the CLI points the root logger at captured streams that close after each test
    root = logging.getLogger()
    level = root.level
    yield
    for h in [h for h in root.handlers if isinstance(h, JSONHandler)]:
        root.removeHandler(h)
    root.setLevel(level)
