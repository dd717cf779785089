# test_input_state.py

from termbox.commands import CommandRun
from termbox.state import (
    AltEnter,
    Backspace,
    Char,
    CtrlC,
    CtrlD,
    CtrlJ,
    Enter,
    Esc,
    InputState,
    KeyAction,
    Mode,
    Resize,
    Shutdown,
    Tick,
)


def type_text(state, text):
    for ch in text:
        if ch == "\n":
            state.handle(AltEnter())
        else:
            state.handle(Char(ch))


class TestEditing:
    """Test suite for buffer editing."""

    def setup_method(self):
        self.state = InputState(80, 24)

    def test_typing_inserts_at_cursor(self):
        type_text(self.state, "hello")
        assert self.state.buffer == "hello"
        assert self.state.cursor == 5
        assert self.state.required_lines == 1
        assert self.state.mode is Mode.EDITING

    def test_backspace_at_start_is_a_no_op(self):
        outcome = self.state.handle(Backspace())
        assert outcome.action is KeyAction.CONTINUE
        assert self.state.buffer == ""
        assert self.state.cursor == 0

    def test_backspace_deletes_before_cursor(self):
        type_text(self.state, "abc")
        self.state.handle(Backspace())
        assert self.state.buffer == "ab"
        assert self.state.cursor == 2

    def test_newline_keys_insert_line_breaks(self):
        type_text(self.state, "line1")
        self.state.handle(AltEnter())
        type_text(self.state, "line2")
        self.state.handle(CtrlJ())
        type_text(self.state, "line3")
        assert self.state.buffer == "line1\nline2\nline3"
        assert self.state.required_lines == 3
        assert self.state.cursor_position() == (2, 5)

    def test_wide_characters(self):
        type_text(self.state, "Hi 🌍")
        assert self.state.lines() == ["Hi 🌍"]
        assert self.state.cursor_position() == (0, 5)

    def test_resize_updates_dimensions(self):
        self.state.geometry_dirty = False
        outcome = self.state.handle(Resize(40, 12))
        assert outcome.resized
        assert (self.state.cols, self.state.rows) == (40, 12)
        assert self.state.wrap_width == 35
        assert self.state.geometry_dirty


class TestSubmission:

    def setup_method(self):
        self.state = InputState(80, 24)

    def test_enter_submits_and_clears(self):
        type_text(self.state, "hello\nworld")
        outcome = self.state.handle(Enter())
        assert outcome.action is KeyAction.SUBMIT
        assert outcome.submitted == "hello\nworld"
        assert outcome.started is None
        assert self.state.buffer == ""
        assert self.state.cursor == 0
        assert self.state.log.texts() == ["hello\nworld"]
        assert self.state.mode is Mode.EDITING

    def test_empty_enter_does_nothing(self):
        outcome = self.state.handle(Enter())
        assert outcome.action is KeyAction.CONTINUE
        assert len(self.state.log) == 0

    def test_log_numbers_turns(self):
        for text in ("one", "two"):
            type_text(self.state, text)
            self.state.handle(Enter())
        assert [line.turn_number for line in self.state.log] == [1, 2]
        assert self.state.log.last.text == "two"

    def test_command_text_is_trimmed(self):
        type_text(self.state, "  tiktok ")
        outcome = self.state.handle(Enter())
        assert outcome.started is not None
        assert self.state.log.last.command == "tiktok"
        assert self.state.mode is Mode.AWAITING_COMMAND_COMPLETION

    def test_unknown_text_is_not_a_command(self):
        type_text(self.state, "tiktok now")
        outcome = self.state.handle(Enter())
        assert outcome.started is None
        assert self.state.log.last.command is None


class TestCommandRuns:
    """Test suite for command run lifecycle in the input state."""

    def setup_method(self):
        self.state = InputState(80, 24)
        self.outcomes = []

    def start_tiktok(self):
        type_text(self.state, "tiktok")
        run = self.state.handle(Enter()).started
        run.request_tick = lambda r: self.outcomes.append(self.state.handle(Tick(r.id)))
        return run

    def test_tiktok_runs_to_completion(self):
        before = CommandRun.active_runs()
        run = self.start_tiktok()
        assert run.total_steps == 10
        assert run.progress == 0
        assert CommandRun.active_runs() == before + 1

        for _ in range(10):
            run.advance()

        assert run.progress == 10
        assert [o.progressed for o in self.outcomes] == [run] * 10
        assert [o.finished for o in self.outcomes[:-1]] == [None] * 9
        assert self.outcomes[-1].finished is run
        assert self.state.mode is Mode.EDITING
        assert self.state.active_run is None
        assert not run.alive
        assert CommandRun.active_runs() == before

    def test_editing_allowed_while_awaiting(self):
        self.start_tiktok()
        type_text(self.state, "abc")
        assert self.state.buffer == "abc"
        assert self.state.mode is Mode.AWAITING_COMMAND_COMPLETION

    def test_plain_submission_cancels_run(self):
        run = self.start_tiktok()
        type_text(self.state, "hello")
        outcome = self.state.handle(Enter())
        assert outcome.submitted == "hello"
        assert run.cancelled
        assert self.state.mode is Mode.AWAITING_COMMAND_COMPLETION

        run.advance()
        assert run.progress == 0
        assert self.outcomes[-1].finished is run
        assert self.outcomes[-1].progressed is None
        assert self.state.mode is Mode.EDITING
        assert not run.alive

    def test_new_command_replaces_run(self):
        first = self.start_tiktok()
        second = self.start_tiktok()
        assert first is not second
        assert first.cancelled and not first.alive
        assert self.state.active_run is second

    def test_replaced_outcome(self):
        first = self.start_tiktok()
        type_text(self.state, "tiktok")
        outcome = self.state.handle(Enter())
        assert outcome.replaced is first
        assert outcome.started is self.state.active_run

    def test_stale_tick_ignored(self):
        run = self.start_tiktok()
        outcome = self.state.handle(Tick(run.id + 1000))
        assert outcome.progressed is None
        assert outcome.finished is None
        assert self.state.active_run is run


class TestExit:

    def setup_method(self):
        self.state = InputState(80, 24)

    def test_exit_keys(self):
        for event in (Esc(), CtrlC(), CtrlD(), Shutdown()):
            state = InputState(80, 24)
            outcome = state.handle(event)
            assert outcome.action is KeyAction.EXIT
            assert state.mode is Mode.EXITING

    def test_exit_cancels_active_run(self):
        type_text(self.state, "tiktok")
        run = self.state.handle(Enter()).started
        outcome = self.state.handle(Esc())
        assert outcome.finished is run
        assert run.cancelled
        assert not run.alive
        assert self.state.active_run is None

    def test_exiting_ignores_further_input(self):
        self.state.handle(CtrlC())
        outcome = self.state.handle(Char("a"))
        assert outcome.action is KeyAction.EXIT
        assert self.state.buffer == ""
