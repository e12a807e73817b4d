"""Tests for window resolution and the day grid."""

from datetime import datetime, timedelta

import pytest

from ganttlayout.engine.window import build_day_grid, clamp_zoom, resolve_window, today_index, today_marker


class TestResolveWindow:
    """Test Monday..Sunday window resolution."""
    
    def test_monday_reference(self, monday):
        window = resolve_window(monday)
        assert window.start == datetime(2024, 6, 10)
        assert window.end == datetime(2024, 6, 16)
    
    def test_midweek_and_sunday_share_week(self):
        wednesday = resolve_window(datetime(2024, 6, 12, 15, 30))
        sunday = resolve_window(datetime(2024, 6, 16, 23, 59))
        assert wednesday == sunday
        assert wednesday.start == datetime(2024, 6, 10)
    
    def test_offsets(self, monday):
        assert resolve_window(monday, 1).start == datetime(2024, 6, 17)
        assert resolve_window(monday, 1).end == datetime(2024, 6, 23)
        assert resolve_window(monday, -1).start == datetime(2024, 6, 3)
    
    @pytest.mark.parametrize("reference", [
        datetime(2024, 6, 10),
        datetime(2024, 6, 13, 18, 45),
        datetime(2024, 12, 31, 12),
        datetime(2025, 1, 5),
    ])
    def test_round_trip(self, reference):
        forward = resolve_window(reference, 1)
        assert resolve_window(forward.start, -1) == resolve_window(reference, 0)
        assert resolve_window(resolve_window(reference, 5).end, -5) == resolve_window(reference, 0)
    
    def test_window_bounds_are_inclusive_days(self, window):
        assert window.range_start == datetime(2024, 6, 10)
        assert window.range_end.date() == datetime(2024, 6, 16).date()
        assert window.range_end.hour == 23 and window.range_end.minute == 59
    
    def test_defaults_to_current_week(self):
        window = resolve_window()
        assert window.start.weekday() == 0
        assert window.start <= datetime.now() <= window.range_end
    
    def test_accepts_iso_string(self):
        assert resolve_window("2024-06-12T10:00:00Z").start == datetime(2024, 6, 10)
    
    def test_rejects_non_integer_offset(self, monday):
        with pytest.raises(TypeError):
            resolve_window(monday, 1.5)
    
    def test_rejects_non_date_reference(self):
        with pytest.raises(TypeError):
            resolve_window(20240610)


class TestBuildDayGrid:
    """Test day grid construction."""
    
    @pytest.mark.parametrize("zoom", [0.5, 0.7, 1.0, 1.3, 2.0])
    def test_seven_consecutive_days(self, window, zoom):
        grid = build_day_grid(window, zoom)
        assert len(grid.days) == 7
        assert grid.days[0] == window.start
        assert grid.days[-1] == window.end
        for previous, current in zip(grid.days, grid.days[1:]):
            assert current - previous == timedelta(days=1)
    
    @pytest.mark.parametrize("zoom", [0.5, 1.0, 2.0])
    def test_widths(self, window, zoom):
        grid = build_day_grid(window, zoom)
        assert grid.day_width_pixels == pytest.approx(100 * zoom)
        assert grid.total_width_pixels == pytest.approx(700 * zoom)
        assert grid.day_percentage == pytest.approx(100 / 7)
    
    def test_custom_base_width(self, window):
        assert build_day_grid(window, 1.5, base_day_width=80).day_width_pixels == pytest.approx(120)
    
    @pytest.mark.parametrize("zoom", [0.49, 2.01, 0])
    def test_rejects_zoom_out_of_range(self, window, zoom):
        with pytest.raises(ValueError):
            build_day_grid(window, zoom)
    
    def test_rejects_non_numeric_zoom(self, window):
        with pytest.raises(TypeError):
            build_day_grid(window, "1.0")


class TestZoomAndToday:
    """Test zoom clamping and the today marker."""
    
    def test_clamp_zoom(self):
        assert clamp_zoom(2.05) == 2.0
        assert clamp_zoom(0.3) == 0.5
        assert clamp_zoom(1.0 + 0.1 + 0.1) == 1.2
    
    def test_today_marker_inside_window(self, grid):
        assert today_index(grid, datetime(2024, 6, 12, 9)) == 2
        assert today_marker(grid, datetime(2024, 6, 12, 9)) == pytest.approx(2.5 * 100 / 7)
    
    def test_today_marker_outside_window(self, grid):
        assert today_index(grid, datetime(2024, 6, 17)) is None
        assert today_marker(grid, datetime(2024, 6, 17)) is None
