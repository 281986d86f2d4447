# tests/test_console.py

from __future__ import annotations

from todo_app.connectors.console_connector import handle_line, run_console_loop


def test_plain_text_is_added_exactly_as_typed(state) -> None:
    out = handle_line(state, "Buy   milk\tnow") or ""
    assert "Added task 1." in out
    assert handle_line(state, "   ") is None

    handle_line(state, "  padded  ")
    assert [t.description for t in state.todo_store.list_all()] == ["Buy   milk\tnow", "  padded  "]


def test_out_of_range_id_is_not_an_internal_error(state) -> None:
    handle_line(state, "keep me")
    assert handle_line(state, "/done 99999999999999999999") == "No task with id 99999999999999999999."
    assert [t.completed for t in state.todo_store.list_all()] == [False]


def test_storage_failure_is_reported_not_raised(state) -> None:
    state.todo_store.close()
    out = handle_line(state, "/list") or ""
    assert out.startswith("Storage error:")


def test_console_loop_runs_until_exit(state) -> None:
    inputs = iter(["Buy milk", "Walk  dog ", "/done 1", "/del 2", "/exit", "never read"])
    outputs: list[str] = []

    run_console_loop(state, input_fn=lambda _prompt: next(inputs), output_fn=outputs.append)

    assert "[x] 1. Buy milk" in outputs[-1]
    assert "Walk  dog" not in outputs[-1]
    assert [t.description for t in state.todo_store.list_all()] == ["Buy milk"]
    assert next(inputs) == "never read"


def test_console_loop_stops_on_eof(state) -> None:
    def eof(_prompt: str) -> str:
        raise EOFError

    outputs: list[str] = []
    run_console_loop(state, input_fn=eof, output_fn=outputs.append)
    assert any("No tasks yet" in o for o in outputs)
