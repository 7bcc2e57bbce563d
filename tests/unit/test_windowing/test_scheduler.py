"""
Unit tests for time window scheduling.
"""

import pytest

from jfrreport.models import RecordingTimeRange, Window, WindowConfig
from jfrreport.windowing import iter_configured_windows, iter_windows

SECOND = 1_000_000_000
BASE = 5 * SECOND


@pytest.mark.unit
class TestIterWindows:
    """Test cases for iter_windows."""

    def test_single_window_without_duration(self):
        time_range = RecordingTimeRange(BASE, BASE + 20 * SECOND)

        windows = list(iter_windows(time_range))

        assert windows == [Window(BASE, BASE + 20 * SECOND, 1)]

    def test_twenty_seconds_in_ten_second_windows(self):
        """A 20s range with 10s windows yields exactly two windows."""
        time_range = RecordingTimeRange(BASE, BASE + 20 * SECOND)

        windows = list(iter_windows(time_range, window_duration=10))

        assert len(windows) == 2
        assert windows[0] == Window(BASE, BASE + 10 * SECOND, 1)
        assert windows[1].start == windows[0].end + 1
        assert windows[1].end == BASE + 20 * SECOND + 1
        assert windows[1].number == 2

    def test_first_split_halves_first_window(self):
        time_range = RecordingTimeRange(BASE, BASE + 20 * SECOND)

        windows = list(iter_windows(time_range, window_duration=10, first_split=True))

        assert windows[0].duration == 5 * SECOND
        assert all(window.duration == 10 * SECOND for window in windows[1:])
        assert len(windows) == 3

    def test_first_split_without_duration(self):
        time_range = RecordingTimeRange(BASE, BASE + 10 * SECOND)

        windows = list(iter_windows(time_range, first_split=True))

        assert [window.duration for window in windows] == [5 * SECOND, 10 * SECOND]

    def test_begin_and_length_select_part_of_recording(self):
        time_range = RecordingTimeRange(BASE, BASE + 60 * SECOND)

        windows = list(iter_windows(time_range, begin=10, length=20))

        assert windows == [Window(BASE + 10 * SECOND, BASE + 30 * SECOND, 1)]

    def test_begin_past_end_yields_nothing(self):
        time_range = RecordingTimeRange(BASE, BASE + 10 * SECOND)

        assert list(iter_windows(time_range, begin=20)) == []

    def test_empty_recording_yields_nothing(self):
        assert list(iter_windows(RecordingTimeRange(0, 0), window_duration=10)) == []

    def test_last_window_not_clipped(self):
        time_range = RecordingTimeRange(BASE, BASE + 15 * SECOND)

        windows = list(iter_windows(time_range, window_duration=10))

        assert len(windows) == 2
        assert windows[-1].end > time_range.end

    def test_windows_are_half_open(self):
        window = Window(10, 20)

        assert window.contains(10)
        assert window.contains(19)
        assert not window.contains(20)

    def test_configured_windows(self):
        time_range = RecordingTimeRange(BASE, BASE + 20 * SECOND)
        config = WindowConfig(begin=0, length=0, duration=10, first_split=False)

        assert list(iter_configured_windows(time_range, config)) == list(
            iter_windows(time_range, window_duration=10)
        )
        assert len(list(iter_configured_windows(time_range))) == 1
