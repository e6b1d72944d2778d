# tests/test_core.py

from datetime import date, datetime

import pytest

from salon.core import format_minutes, is_hhmm, overlaps, to_minutes, weekday_name


class TestTimeHelpers:

    def test_to_minutes(self):
        assert to_minutes("00:00") == 0
        assert to_minutes("09:30") == 570
        assert to_minutes("23:59") == 1439

    @pytest.mark.parametrize("value", ["9:30", "24:00", "12:60", "", "noon", "12:00:00"])
    def test_to_minutes_rejects_bad_values(self, value):
        with pytest.raises(ValueError):
            to_minutes(value)

    def test_format_minutes_pads(self):
        assert format_minutes(0) == "00:00"
        assert format_minutes(545) == "09:05"
        assert format_minutes(1080) == "18:00"

    def test_format_minutes_out_of_range(self):
        with pytest.raises(ValueError):
            format_minutes(24 * 60)

    def test_is_hhmm(self):
        assert is_hhmm("18:00")
        assert not is_hhmm("18:0")
        assert not is_hhmm(None)

    def test_weekday_name(self):
        assert weekday_name(date(2030, 1, 7)) == "monday"
        assert weekday_name(date(2030, 1, 6)) == "sunday"


class TestOverlaps:

    def test_overlapping_ranges(self):
        assert overlaps(540, 780, 600, 840)
        assert overlaps(600, 840, 540, 780)

    def test_contained_range(self):
        assert overlaps(600, 660, 540, 1080)

    def test_touching_ranges_do_not_overlap(self):
        assert not overlaps(600, 840, 840, 1080)
        assert not overlaps(840, 1080, 600, 840)

    def test_works_with_datetimes(self):
        a = datetime(2030, 1, 7, 10), datetime(2030, 1, 7, 14)
        b = datetime(2030, 1, 7, 13), datetime(2030, 1, 7, 15)
        assert overlaps(*a, *b)
