"""
Tests for resize handle geometry, handle proposals, cursors and interaction modes.
"""
import pytest
from PyQt5.QtCore import Qt

from components.transform_widgets import (
    CornerHandle, EdgeHandle, PanMode, SelectMode, create_handle, create_mode, transform_point,
)


# ══════════════════════════════════════════════════════════════════════════
# Handles
# ══════════════════════════════════════════════════════════════════════════

class TestHandlePosition:

    def test_transform_point_rotates_about_center(self):
        point = transform_point(10, 0, 100, 100, 90)
        assert point.x == pytest.approx(100)
        assert point.y == pytest.approx(110)

    @pytest.mark.parametrize("handle_id,expected", [
        ('tl', (550, 370)), ('tr', (650, 370)), ('bl', (550, 430)), ('br', (650, 430)),
        ('t', (600, 370)), ('r', (650, 400)), ('b', (600, 430)), ('l', (550, 400)),
    ])
    def test_unrotated_positions(self, rect, handle_id, expected):
        pos = create_handle(handle_id).position(rect(600, 400, 50, 30))
        assert (pos.x, pos.y) == pytest.approx(expected)

    def test_rotated_position(self, rect):
        pos = create_handle('r').position(rect(600, 400, 50, 30, 90))
        assert pos.x == pytest.approx(600)
        assert pos.y == pytest.approx(450)

    def test_hit_test_tolerance(self, rect):
        handle = create_handle('br')
        table = rect(600, 400, 50, 30)
        assert handle.hit_test(650, 430, table)
        assert handle.hit_test(659, 430, table)  # size 6 + tolerance 4
        assert not handle.hit_test(661, 430, table)


class TestHandlePropose:

    def test_right_edge_grows_width_only(self, rect):
        assert create_handle('r').propose(rect(600, 400, 50, 30), 40, 999) == (70, 30)

    def test_left_edge_grows_on_negative_delta(self, rect):
        assert create_handle('l').propose(rect(600, 400, 50, 30), -40, 0) == (70, 30)

    def test_top_edge(self, rect):
        assert create_handle('t').propose(rect(600, 400, 50, 30), 0, -20) == (50, 40)

    def test_corner_changes_both(self, rect):
        assert create_handle('br').propose(rect(600, 400, 50, 30), 20, 40) == (60, 50)
        assert create_handle('tl').propose(rect(600, 400, 50, 30), 20, 40) == (40, 20)

    def test_floor_at_min(self, rect):
        assert create_handle('r').propose(rect(600, 400, 50, 30), -500, 0) == (20, 30)

    def test_unknown_handle(self):
        with pytest.raises(ValueError):
            create_handle('rotate')


class TestHandleCursor:

    def test_corner_cursors(self):
        assert CornerHandle('tl').get_cursor() == Qt.SizeFDiagCursor
        assert CornerHandle('br').get_cursor() == Qt.SizeFDiagCursor
        assert CornerHandle('tr').get_cursor() == Qt.SizeBDiagCursor
        assert CornerHandle('bl').get_cursor() == Qt.SizeBDiagCursor

    def test_edge_cursors(self):
        assert EdgeHandle('l').get_cursor() == Qt.SizeHorCursor
        assert EdgeHandle('t').get_cursor() == Qt.SizeVerCursor


# ══════════════════════════════════════════════════════════════════════════
# Modes
# ══════════════════════════════════════════════════════════════════════════

class TestModes:

    def test_factory(self):
        assert isinstance(create_mode('select'), SelectMode)
        assert isinstance(create_mode('pan'), PanMode)
        assert isinstance(create_mode('bogus'), SelectMode)

    def test_select_mode_has_eight_handles(self):
        assert set(create_mode('select').get_handles()) == {'tl', 'tr', 'bl', 'br', 't', 'r', 'b', 'l'}

    def test_pan_mode_has_no_handles(self):
        mode = create_mode('pan')
        assert not mode.moves_tables
        assert mode.get_handle_at_pos(0, 0, None) is None

    def test_corner_wins_over_edge(self, rect):
        # Tiny table: every handle overlaps the top-left corner
        table = rect(100, 100, 2, 2)
        handle = create_mode('select').get_handle_at_pos(98, 98, table)
        assert handle.handle_id == 'tl'

    def test_miss(self, rect):
        assert create_mode('select').get_handle_at_pos(600, 400, rect(600, 400, 50, 50)) is None
