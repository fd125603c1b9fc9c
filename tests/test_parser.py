"""Tests for the statistics payload parser."""

import pytest

from statwatch.errors import FormatError, NumericError, StatsError
from statwatch.monitor.parser import StatsSample, parse_stats


class TestStatsSample:
    """Tests for the StatsSample record."""

    def test_from_values_keeps_order(self):
        sample = StatsSample.from_values([1, 2, 3, 4, 5, 6, 7])

        assert sample.load_average == 1.0
        assert sample.total_memory == 2.0
        assert sample.used_memory == 3.0
        assert sample.total_disk == 4.0
        assert sample.used_disk == 5.0
        assert sample.total_network == 6.0
        assert sample.used_network == 7.0
        assert sample.as_tuple() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0)

    def test_from_values_wrong_length(self):
        with pytest.raises(ValueError, match="needs 7 values"):
            StatsSample.from_values([1, 2, 3])


class TestParseStats:
    """Tests for parse_stats."""

    def test_parse_valid_payload(self):
        sample = parse_stats("1.5,8589934592,4294967296,536870912000,107374182400,125000000,1000")

        assert sample.as_tuple() == (
            1.5,
            8589934592.0,
            4294967296.0,
            536870912000.0,
            107374182400.0,
            125000000.0,
            1000.0,
        )

    def test_parse_preserves_precision(self):
        """Values come back exactly as float() parses them."""
        fields = ["0.1", "1e3", "123456789.123", "-2.5", "0", "3.14159", "42"]
        sample = parse_stats(",".join(fields))

        assert sample.as_tuple() == tuple(float(f) for f in fields)

    def test_parse_trims_surrounding_whitespace(self):
        sample = parse_stats("  31,100,50,100,95,100,95\n")

        assert sample.load_average == 31.0
        assert sample.used_network == 95.0

    def test_parse_too_few_fields(self):
        with pytest.raises(FormatError) as exc_info:
            parse_stats("1,2,3")

        assert exc_info.value.field_count == 3
        assert exc_info.value.expected == 7

    def test_parse_too_many_fields(self):
        with pytest.raises(FormatError):
            parse_stats("1,2,3,4,5,6,7,8")

    def test_parse_empty_body(self):
        with pytest.raises(FormatError):
            parse_stats("")

    def test_parse_trailing_comma(self):
        """A trailing comma yields an eighth, empty field."""
        with pytest.raises(FormatError):
            parse_stats("1,2,3,4,5,6,7,")

    def test_parse_non_numeric_field(self):
        with pytest.raises(NumericError) as exc_info:
            parse_stats("1,2,x,4,5,6,7")

        assert exc_info.value.index == 2
        assert exc_info.value.value == "x"

    def test_parse_empty_field(self):
        with pytest.raises(NumericError):
            parse_stats("1,2,,4,5,6,7")

    @pytest.mark.parametrize("bad", ["nan", "inf", "-Infinity"])
    def test_parse_rejects_non_finite(self, bad):
        with pytest.raises(NumericError):
            parse_stats(f"1,2,3,4,5,6,{bad}")

    @pytest.mark.parametrize(
        "payload",
        [
            "1_000,2,3,4,5,6,7",
            "1, 2,3,4,5,6,7",
            "1,2 ,3,4,5,6,7",
            "١,2,3,4,5,6,7",
            "0x1A,2,3,4,5,6,7",
            "1e,2,3,4,5,6,7",
            "1e999,2,3,4,5,6,7",
        ],
    )
    def test_parse_rejects_non_decimal_spellings(self, payload):
        """Only plain ASCII decimals are accepted, with no padding inside the payload."""
        with pytest.raises(NumericError):
            parse_stats(payload)

    @pytest.mark.parametrize("field", ["+1", "-1", ".5", "5.", "2.5E-3", "1e+3"])
    def test_parse_accepts_decimal_forms(self, field):
        sample = parse_stats(f"{field},2,3,4,5,6,7")

        assert sample.load_average == float(field)

    def test_errors_share_base_class(self):
        """The poller catches every parse failure through StatsError."""
        assert issubclass(FormatError, StatsError)
        assert issubclass(NumericError, StatsError)
