# test_renderer.py

import pytest
from rich.cells import cell_len

from termbox.display import (
    ASCII,
    FrameDefinitions,
    FrameGeometry,
    FrameRenderer,
    MoveTo,
    WriteText,
    compute_geometry,
    encode_all,
    geometry_for,
)
from termbox.errors import LayoutContractViolation
from termbox.layout import content_width, cursor_position, render_lines


def render_buffer(renderer, buffer, columns, rows, offset=None):
    offset = len(buffer) if offset is None else offset
    width = content_width(columns)
    geometry = geometry_for(buffer, columns, rows)
    ops = renderer.render(
        geometry,
        render_lines(buffer, width),
        cursor_position(buffer, offset, width)
    )
    return geometry, ops


class TestFrameRenderer:
    """Test suite for frame rendering."""

    def setup_method(self):
        self.renderer = FrameRenderer()

    def test_single_line_frame(self):
        geometry = FrameGeometry(20, 3, 10)
        output = encode_all(self.renderer.render(geometry, ["hi"], (0, 2)))
        assert output == (
            "\x1b[8;1H╭" + "─" * 18 + "╮"
            "\x1b[9;1H│ > hi" + " " * 13 + "│"
            "\x1b[10;1H╰" + "─" * 18 + "╯"
            "\x1b[9;7H"
        )

    def test_multiline_frame(self):
        geometry, ops = render_buffer(self.renderer, "A\nB", 16, 8)
        assert geometry == FrameGeometry(16, 4, 8)
        output = encode_all(ops)
        assert "\x1b[5;1H╭──────────────╮" in output
        assert "\x1b[6;1H│ > A          │" in output
        assert "\x1b[7;1H│   B          │" in output
        assert "\x1b[8;1H╰──────────────╯" in output
        assert output.endswith("\x1b[7;6H")

    def test_wide_characters_padded_by_cells(self):
        rows = self.renderer.frame_rows(FrameGeometry(20, 3, 10), ["Hi 🌍"])
        assert rows[1] == "│ > Hi 🌍" + " " * 10 + "│"

    def test_cursor_is_last_operation(self):
        _, ops = render_buffer(self.renderer, "x", 25, 12)
        assert ops[-1] == MoveTo(10, 5)
        assert encode_all(ops).endswith("\x1b[11;6H")

    @pytest.mark.parametrize("buffer", ["", "hello world foo", "a\nb\nc", "你好 世界 " * 4])
    def test_rows_exactly_frame_width(self, buffer):
        geometry = geometry_for(buffer, 20, 12)
        rows = self.renderer.frame_rows(geometry, render_lines(buffer, content_width(20)))
        assert len(rows) == geometry.height
        assert all(cell_len(row) == 20 for row in rows)

    @pytest.mark.parametrize("buffer", ["", "some text", "one\ntwo\nthree\nfour"])
    def test_only_frame_rows_targeted(self, buffer):
        geometry, ops = render_buffer(self.renderer, buffer, 30, 12)
        for op in ops:
            if isinstance(op, MoveTo):
                assert geometry.contains(op.row)

    def test_render_is_idempotent(self):
        geometry = FrameGeometry(30, 4, 12)
        first = self.renderer.render(geometry, ["one", "two"], (1, 3))
        second = self.renderer.render(geometry, ["one", "two"], (1, 3))
        assert first == second

    def test_clamped_frame_follows_cursor(self):
        geometry = compute_geometry(10, 20, 6)
        assert geometry.height == 5
        lines = [f"l{i}" for i in range(10)]
        rows = self.renderer.frame_rows(geometry, lines, cursor_row=9)
        assert [row[4:6] for row in rows[1:-1]] == ["l7", "l8", "l9"]
        assert rows[1].startswith("│   ")
        position = self.renderer.cursor_on_screen(geometry, 10, (9, 2))
        assert position.row == 3
        assert position.col == 6

    def test_clear_blanks_frame_and_row_above(self):
        geometry = FrameGeometry(10, 3, 8)
        ops = self.renderer.clear(geometry, extra_above=1)
        moves = [op.row for op in ops if isinstance(op, MoveTo)]
        assert moves == [4, 5, 6, 7]
        assert all(op.text == " " * 10 for op in ops if isinstance(op, WriteText))

    def test_ascii_glyphs(self):
        renderer = FrameRenderer(FrameDefinitions.named('ascii'))
        rows = renderer.frame_rows(FrameGeometry(10, 3, 8), ["ok"])
        assert rows == ["+--------+", "| > ok   |", "+--------+"]
        assert renderer.glyphs is ASCII


class TestGeometry:

    def test_origin_and_region(self):
        geometry = FrameGeometry(80, 3, 24)
        assert geometry.origin == 21
        assert geometry.scroll_region.bottom == 20

    def test_height_tracks_lines(self):
        assert compute_geometry(1, 80, 24).height == 3
        assert compute_geometry(4, 80, 24).height == 6

    def test_height_clamped_below_terminal(self):
        assert compute_geometry(50, 80, 24).height == 23

    @pytest.mark.parametrize("columns, rows", [(5, 24), (80, 3)])
    def test_terminal_too_small(self, columns, rows):
        with pytest.raises(LayoutContractViolation):
            compute_geometry(1, columns, rows)

    def test_prompt_must_fill_prompt_cells(self):
        with pytest.raises(ValueError):
            FrameDefinitions(prompt='>')


class TestCursorAtFullWidth:

    def test_full_width_line_keeps_cursor_in_frame(self):
        buffer = "x" * 15
        geometry = geometry_for(buffer, 20, 10)
        assert cursor_position(buffer, 15, content_width(20)) == (0, 15)
        position = FrameRenderer().cursor_on_screen(geometry, 1, (0, 15))
        assert position.col == geometry.width - 1
        assert geometry.contains(geometry.origin + position.row)
