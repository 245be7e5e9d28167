import pytest

from utils.parse import parse_boolean, parse_positive_number, parse_string


@pytest.mark.unit
class TestParseString:

    @pytest.mark.parametrize("value", [None, "", 0, False])
    def test_falsy_values_become_empty(self, value):
        assert parse_string(value) == ""

    def test_keeps_strings(self):
        assert parse_string("EUR") == "EUR"

    def test_stringifies_other_values(self):
        assert parse_string(12) == "12"
        assert parse_string(True) == "true"


@pytest.mark.unit
class TestParsePositiveNumber:

    def test_numeric_string(self):
        assert parse_positive_number("30") == 30
        assert isinstance(parse_positive_number("30"), int)

    def test_fractional_value_kept(self):
        assert parse_positive_number("2.5") == 2.5

    def test_reads_leading_number(self):
        assert parse_positive_number("30px") == 30
        assert parse_positive_number("  2.5kg") == 2.5
        assert parse_positive_number("1e2") == 100

    @pytest.mark.parametrize("value", ["px30", ".", "-", "e5"])
    def test_no_leading_number(self, value):
        assert parse_positive_number(value) is None

    def test_integral_float_becomes_int(self):
        assert parse_positive_number(4.0) == 4
        assert isinstance(parse_positive_number(4.0), int)

    @pytest.mark.parametrize("value", [-5, "-1", 0, "0", "abc", None, True, [], {}, float("nan")])
    def test_invalid_or_not_positive(self, value):
        assert parse_positive_number(value) is None


@pytest.mark.unit
class TestParseBoolean:

    def test_real_booleans(self):
        assert parse_boolean(True, False) is True
        assert parse_boolean(False, True) is False

    def test_boolean_strings(self):
        assert parse_boolean("true", False) is True
        assert parse_boolean("false", True) is False

    @pytest.mark.parametrize("value", ["not-a-bool", "TRUE", 1, None, ""])
    def test_falls_back_to_default(self, value):
        assert parse_boolean(value, False) is False

    def test_default_is_none(self):
        assert parse_boolean("yes") is None
