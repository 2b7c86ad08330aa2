"""Unit tests for the request pipeline.

Covers:
- Ok/Err results.
- First-error-wins: later stages and the handler never run after an Err.
- The handler only runs when every stage passes.
- Lookup stages expose the found record to later stages.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import BadRequest, NotFound
from modules.core.validators import id_matches_route, record_exists
from shared.domain.pipeline import Pipeline, RequestContext
from shared.domain.result import OK, Err, Ok

pytestmark = pytest.mark.unit


def _passing(context):
    context.locals.setdefault("seen", []).append("passing")
    return OK


def _failing(context):
    context.locals.setdefault("seen", []).append("failing")
    return Err(BadRequest, "first failure")


def _also_failing(context):
    context.locals.setdefault("seen", []).append("also_failing")
    return Err(BadRequest, "second failure")


class TestResult:
    def test_ok_is_ok(self):
        assert Ok("value").is_ok
        assert Ok("value").value == "value"

    def test_err_builds_its_exception(self):
        err = Err(NotFound, "missing")
        assert not err.is_ok
        exc = err.to_exception()
        assert isinstance(exc, NotFound)
        assert str(exc) == "missing"


class TestPipeline:
    def test_handler_runs_when_all_stages_pass(self):
        handler = MagicMock(return_value="done")
        context = RequestContext()

        assert Pipeline(_passing, _passing).run(context, handler) == "done"
        handler.assert_called_once_with(context)

    def test_empty_pipeline_runs_handler(self):
        assert Pipeline().run(RequestContext(), lambda ctx: 42) == 42

    def test_first_error_wins(self):
        handler = MagicMock()
        context = RequestContext()

        with pytest.raises(BadRequest, match="first failure"):
            Pipeline(_passing, _failing, _also_failing).run(context, handler)

        handler.assert_not_called()
        assert context.locals["seen"] == ["passing", "failing"]

    def test_check_returns_first_err(self):
        result = Pipeline(_failing, _also_failing).check(RequestContext())
        assert isinstance(result, Err)
        assert result.message == "first failure"

    def test_check_returns_ok(self):
        assert Pipeline(_passing).check(RequestContext()).is_ok


class TestLookupStages:
    def test_record_exists_stores_record(self):
        repo = MagicMock()
        record = MagicMock(id="abc")
        repo.get_by_id.return_value = record
        stage = record_exists(repo, "thing", NotFound, "Thing does not exist: {id}")
        context = RequestContext(route_id="abc")

        assert stage(context).is_ok
        assert context.locals["thing"] is record
        assert stage.__name__ == "thing_exists"

    def test_record_exists_missing(self):
        repo = MagicMock()
        repo.get_by_id.return_value = None
        stage = record_exists(repo, "thing", NotFound, "Thing does not exist: {id}")

        result = stage(RequestContext(route_id="nope"))

        assert result.kind is NotFound
        assert result.message == "Thing does not exist: nope"

    @pytest.mark.parametrize("supplied", [None, "", "abc"])
    def test_id_matches_route_accepts(self, supplied):
        stage = id_matches_route("thing", BadRequest, "{id} != {route}")
        payload = {} if supplied is None else {"id": supplied}
        context = RequestContext(payload=payload, locals={"thing": MagicMock(id="abc")})

        assert stage(context).is_ok

    def test_id_matches_route_rejects_mismatch(self):
        stage = id_matches_route("thing", BadRequest, "{id} != {route}")
        context = RequestContext(payload={"id": "xyz"}, locals={"thing": MagicMock(id="abc")})

        result = stage(context)

        assert result.kind is BadRequest
        assert result.message == "xyz != abc"
