# tests/test_expand_service.py
from __future__ import annotations

import logging

import pytest

from hostlist.domain.expand_service import ExpandService, ExpansionError
from hostlist.domain.hostspec import BadNumbers, ExtraStuff, NoRange


@pytest.fixture
def svc() -> ExpandService:
    return ExpandService()


def test_concatenates_in_input_order(svc: ExpandService) -> None:
    out = list(svc.expand(["b[2-3]", "a1", "c[9,1]"]))
    assert out == ["b2", "b3", "a1", "c9", "c1"]


def test_empty_input_yields_nothing(svc: ExpandService) -> None:
    assert list(svc.expand([])) == []
    assert list(svc.expand(["", ""])) == []


def test_failure_after_skipped_empty_keeps_position(svc: ExpandService) -> None:
    out: list[str] = []
    with pytest.raises(ExpansionError) as exc:
        for host in svc.expand(["good[1]", "", "bad[1-"]):
            out.append(host)
    assert out == ["good1"]
    assert exc.value.position == 2
    assert isinstance(exc.value.error, NoRange)
    assert exc.value.__cause__ is exc.value.error


@pytest.mark.parametrize(
    "expr, kind",
    [("host[1234]foo", ExtraStuff), ("host[1-", NoRange), ("host[abc]", BadNumbers)],
)
def test_error_kinds_reported_with_position(svc: ExpandService, expr: str, kind: type) -> None:
    with pytest.raises(ExpansionError) as exc:
        list(svc.expand(["ok1", expr]))
    assert exc.value.position == 1
    assert isinstance(exc.value.error, kind)
    assert str(exc.value) == f"error at arg 1: {exc.value.error}"


def test_stops_at_first_failure(svc: ExpandService) -> None:
    with pytest.raises(ExpansionError) as exc:
        list(svc.expand(["x[", "y[1]z"]))
    assert exc.value.position == 0
    assert isinstance(exc.value.error, NoRange)


def test_start_offsets_positions(svc: ExpandService) -> None:
    with pytest.raises(ExpansionError) as exc:
        list(svc.expand(["a1", "oops"], start=1))
    assert exc.value.position == 2


def test_later_expressions_not_decomposed_before_pulled(svc: ExpandService) -> None:
    gen = svc.expand(["h[1-2]", "broken["])
    assert next(gen) == "h1"
    assert next(gen) == "h2"
    with pytest.raises(ExpansionError):
        next(gen)


def test_idempotent(svc: ExpandService) -> None:
    exprs = ["r[3-1]", "n[1-5,2]", "", "x10"]
    assert list(svc.expand(exprs)) == list(svc.expand(exprs))
    assert list(svc.expand(exprs)) == ["n1", "n2", "n3", "n4", "n5", "n2", "x10"]


def test_accepts_any_iterable(svc: ExpandService) -> None:
    assert list(svc.expand(iter(["a[1-2]"]))) == ["a1", "a2"]


def test_logs_failure(svc: ExpandService, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="expand_service"):
        with pytest.raises(ExpansionError):
            list(svc.expand(["bad["]))
    assert [r.getMessage() for r in caplog.records] == ["hostlist.expression.failed"]
    assert caplog.records[0].extra == {"position": 0, "kind": "NoRange"}
