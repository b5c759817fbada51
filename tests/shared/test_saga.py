# tests/shared/test_saga.py
# -*- coding: utf-8 -*-
import asyncio

import pytest

from app.shared.utils.saga import Saga


class _Recorder:
    def __init__(self):
        self.calls = []

    def action(self, name, result=None, exc=None):
        async def _run(ctx):
            self.calls.append(name)
            if exc is not None:
                raise exc
            return result

        return _run


@pytest.mark.asyncio
async def test_results_are_stored_by_step_name():
    rec = _Recorder()
    saga = (
        Saga("alta")
        .add_step("a", rec.action("a", 1))
        .add_step("b", rec.action("b", 2))
    )

    ctx = await saga.run({"seed": 0})

    assert ctx == {"seed": 0, "a": 1, "b": 2}
    assert rec.calls == ["a", "b"]


@pytest.mark.asyncio
async def test_failure_compensates_completed_steps_in_reverse():
    rec = _Recorder()
    saga = (
        Saga("alta")
        .add_step("a", rec.action("a"), compensation=rec.action("undo_a"))
        .add_step("b", rec.action("b"), compensation=rec.action("undo_b"))
        .add_step("c", rec.action("c", exc=ValueError("c falló")), compensation=rec.action("undo_c"))
    )

    with pytest.raises(ValueError, match="c falló"):
        await saga.run()

    assert rec.calls == ["a", "b", "c", "undo_b", "undo_a"]


@pytest.mark.asyncio
async def test_compensation_failure_does_not_hide_original_error(caplog):
    rec = _Recorder()
    saga = (
        Saga("alta")
        .add_step("a", rec.action("a"), compensation=rec.action("undo_a"))
        .add_step("b", rec.action("b"), compensation=rec.action("undo_b", exc=RuntimeError("no se pudo")))
        .add_step("c", rec.action("c", exc=KeyError("c")))
    )

    with pytest.raises(KeyError):
        await saga.run()

    assert rec.calls == ["a", "b", "c", "undo_b", "undo_a"]
    assert "compensación 'b' falló" in caplog.text


@pytest.mark.asyncio
async def test_cancellation_also_compensates():
    rec = _Recorder()
    started = asyncio.Event()

    async def slow(ctx):
        started.set()
        await asyncio.sleep(10)

    saga = (
        Saga("alta")
        .add_step("a", rec.action("a"), compensation=rec.action("undo_a"))
        .add_step("slow", slow)
    )
    task = asyncio.create_task(saga.run())
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert rec.calls == ["a", "undo_a"]

# Fin del archivo tests/shared/test_saga.py
