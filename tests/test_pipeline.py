from __future__ import annotations

import pytest

from soc2_bootstrap.errors import CloneFailure, StepFailure
from soc2_bootstrap.pipeline import run_pipeline


class _Recorder:
    def __init__(self, step_id: str, seen: list, exc: Exception | None = None) -> None:
        self.step_id = step_id
        self.description = f"step {step_id}"
        self._seen = seen
        self._exc = exc

    def run(self, ctx) -> None:
        self._seen.append(self.step_id)
        if self._exc is not None:
            raise self._exc


def test_runs_in_order(make_ctx, config_variant) -> None:
    seen: list = []
    steps = [_Recorder("a", seen), _Recorder("b", seen), _Recorder("c", seen)]

    result = run_pipeline(ctx=make_ctx(config_variant), steps=steps)

    assert seen == ["a", "b", "c"]
    assert result.ran_steps == ["a", "b", "c"]


def test_stops_at_first_failure_and_tags_step(make_ctx, config_variant) -> None:
    seen: list = []
    steps = [_Recorder("a", seen), _Recorder("b", seen, CloneFailure("nope")), _Recorder("c", seen)]

    with pytest.raises(CloneFailure) as exc:
        run_pipeline(ctx=make_ctx(config_variant), steps=steps)

    assert seen == ["a", "b"]
    assert exc.value.step_id == "b"


def test_keeps_explicit_step_id(make_ctx, config_variant) -> None:
    steps = [_Recorder("a", [], StepFailure("nope", step_id="elsewhere"))]
    with pytest.raises(StepFailure) as exc:
        run_pipeline(ctx=make_ctx(config_variant), steps=steps)
    assert exc.value.step_id == "elsewhere"


def test_os_errors_become_step_failures(make_ctx, config_variant) -> None:
    steps = [_Recorder("a", [], PermissionError(13, "Permission denied"))]

    with pytest.raises(StepFailure) as exc:
        run_pipeline(ctx=make_ctx(config_variant), steps=steps)

    assert exc.value.step_id == "a"
    assert isinstance(exc.value.__cause__, PermissionError)


def test_other_errors_propagate(make_ctx, config_variant) -> None:
    steps = [_Recorder("a", [], KeyError("x"))]
    with pytest.raises(KeyError):
        run_pipeline(ctx=make_ctx(config_variant), steps=steps)
