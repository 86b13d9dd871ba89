"""Unit tests for estimate_size."""

import pytest

from mincache import estimate_size


class TestEstimateSize:
    """Test the approximate size heuristic."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, 4),
            (False, 4),
            ("", 0),
            ("abc", 6),
            (0, 8),
            (12345678901234567890, 8),
            (3.5, 8),
            (None, 0),
        ],
    )
    def test_scalars(self, value, expected):
        """Test fixed costs for scalar values."""
        assert estimate_size(value) == expected

    def test_objects_use_compact_json(self):
        """Test containers cost their compact JSON length."""
        assert estimate_size({"foo": "bar"}) == len('{"foo":"bar"}')
        assert estimate_size([1, 2, 3]) == len("[1,2,3]")

    def test_non_ascii_counts_utf8_bytes(self):
        """Test JSON text is measured in UTF-8 bytes."""
        assert estimate_size(["é"]) == len('["é"]'.encode("utf-8"))

    def test_non_json_values_fall_back_to_str(self):
        """Test values JSON cannot encode are rendered with str."""
        value = {"when": object()}
        assert estimate_size(value) > 0

    def test_circular_reference_does_not_fail(self):
        """Test a self-referencing container still gets a size."""
        value = {"name": "loop"}
        value["self"] = value
        assert estimate_size(value) > 0

    def test_seen_objects_counted_once(self):
        """Test a shared visited set skips objects it has already measured."""
        shared = {"a": 1}
        seen = set()

        first = estimate_size(shared, seen)
        second = estimate_size(shared, seen)

        assert first == len('{"a":1}')
        assert second == 0

    def test_strings_count_utf16_code_units(self):
        """Test characters outside the BMP cost two code units."""
        assert estimate_size("é") == 2
        assert estimate_size("\U0001F600") == 4
        assert estimate_size("a\U0001F600") == 6

    def test_nested_duplicates_are_not_deduplicated(self):
        """Test repeated nested references are counted each time."""
        inner = {"k": "v"}
        assert estimate_size([inner, inner]) == len('[{"k":"v"},{"k":"v"}]')
