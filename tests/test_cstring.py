import pytest

from cubed.cstring import atoi, split, strncmp, trim


@pytest.mark.parametrize(
    "value", [0, 7, 42, 255, -1, -300, 2147483647, -2147483648]
)
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r128") == atoi("128")


def test_atoi_stops_at_non_digit():
    assert atoi("12,34") == atoi("12")


def test_atoi_plus_sign():
    assert atoi("+7") == atoi("7")


@pytest.mark.parametrize("text", ["", "abc", "+", "-", "+-5", "- 5", "   "])
def test_atoi_without_number_is_zero(text):
    assert atoi(text) == 0


def test_atoi_positive_overflow():
    assert atoi("2147483648") == -1


def test_atoi_negative_overflow():
    assert atoi("-2147483649") == 0


def test_split_drops_empty_pieces():
    assert split("  NO   ./path/no.xpm ", " ") == ["NO", "./path/no.xpm"]


def test_split_rgb():
    assert split("220,100,0", ",") == ["220", "100", "0"]


@pytest.mark.parametrize("text", ["", ",,,"])
def test_split_nothing(text):
    assert split(text, ",") == []


def test_split_join_round_trip():
    parts = ["map", "cub"]
    assert split(".".join(parts), ".") == parts


def test_strncmp_equal():
    assert strncmp("NO", "NO", 2) == 0


def test_strncmp_zero_length():
    assert strncmp("F", "C", 0) == 0


def test_strncmp_limited_prefix():
    assert strncmp("F", "FLOOR", 1) == 0
    assert strncmp("cub", "cubx", 3) == 0


def test_strncmp_past_end_sees_terminator():
    assert strncmp("cub", "cubx", 10) < 0
    assert strncmp("cubx", "cub", 10) > 0


def test_strncmp_antisymmetric():
    assert strncmp("F", "C", 1) > 0
    assert strncmp("F", "C", 1) == -strncmp("C", "F", 1)


def test_trim_newline():
    assert trim("1111\n", "\n") == "1111"


def test_trim_only_newline_is_empty():
    assert trim("\n", "\n") == ""
    assert trim("  \n", " \n") == ""


def test_trim_both_ends_keeps_inner():
    assert trim("  1 0 1  ", " ") == "1 0 1"