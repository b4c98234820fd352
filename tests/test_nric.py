import pytest

from nationalid.core.exceptions import InvalidSelectorError
from nationalid.core.random_source import PythonRandomSource, ScriptedRandomSource
from nationalid.schemes.nric import (
    CHECKSUM_TABLES,
    calculate_checksum,
    checksum_table,
    format_nric,
    generate_many_nrics,
    generate_nric,
    get_nric_info,
    is_correct_nric_format,
    validate_nric,
)


@pytest.mark.parametrize("first_char, expected", [
    ("S", "D"),
    ("T", "J"),
    ("F", "N"),
    ("G", "X"),
    ("M", "K"),
])
def test_calculate_checksum_literal(first_char, expected):
    assert calculate_checksum(first_char, "1234567") == expected


def test_calculate_checksum_is_deterministic():
    assert calculate_checksum("G", "7654321") == calculate_checksum("G", "7654321")


def test_only_matching_checksum_validates():
    checksum = calculate_checksum("S", "1234567")
    assert validate_nric("S1234567" + checksum) is True
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        if letter != checksum:
            assert validate_nric("S1234567" + letter) is False


def test_checksum_table_groups():
    assert checksum_table("S") == CHECKSUM_TABLES["ST"]
    assert checksum_table("T") == CHECKSUM_TABLES["ST"]
    assert checksum_table("F") == CHECKSUM_TABLES["FG"]
    assert checksum_table("G") == CHECKSUM_TABLES["FG"]
    assert checksum_table("M") == CHECKSUM_TABLES["M"]
    assert all(len(table) == 11 for table in CHECKSUM_TABLES.values())


@pytest.mark.parametrize("selector", ["A", "", "ST", "s"])
def test_checksum_table_rejects_unknown_selector(selector):
    with pytest.raises(InvalidSelectorError):
        checksum_table(selector)


def test_invalid_selector_is_value_error():
    with pytest.raises(ValueError, match="Unable to find checksum table"):
        calculate_checksum("A", "1234567")


def test_calculate_checksum_rejects_bad_digits():
    with pytest.raises(ValueError):
        calculate_checksum("S", "123")
    with pytest.raises(ValueError):
        calculate_checksum("S", "12345AB")


def test_format_rejection():
    assert is_correct_nric_format("A1234567B") is False
    assert validate_nric("A1234567B") is False


@pytest.mark.parametrize("value", ["S1234567D", " s1234567d ", "t1234567j"])
def test_validate_normalizes(value):
    assert is_correct_nric_format(value) is True
    assert validate_nric(value) is True


@pytest.mark.parametrize("value", ["", "S123456D", "S12345678D", "S1234567", "S1234567DD", None, 1234567])
def test_validate_rejects_malformed(value):
    assert validate_nric(value) is False


def test_validate_list():
    assert validate_nric(["S1234567D", "T1234567J"]) is True
    assert validate_nric(["S1234567D", "T1234567A"]) is False
    assert validate_nric([]) is True


def test_generate_with_prefix_exact():
    rng = ScriptedRandomSource([1, 2, 3, 4, 5, 6, 7])
    assert generate_nric("s", rng=rng) == "S1234567D"


def test_generate_random_prefix_exact():
    # First draw picks index 1 of S, T, F, G, M.
    assert generate_nric(rng=ScriptedRandomSource([1, 1, 2, 3, 4, 5, 6, 7])) == "T1234567J"


def test_generate_ignores_invalid_prefix():
    assert generate_nric("X", rng=ScriptedRandomSource([4, 1, 2, 3, 4, 5, 6, 7])) == "M1234567K"
    assert generate_nric("ST", rng=ScriptedRandomSource([0, 1, 2, 3, 4, 5, 6, 7])) == "S1234567D"


def test_generate_round_trip():
    rng = PythonRandomSource(seed=11)
    for _ in range(300):
        value = generate_nric(rng=rng)
        assert validate_nric(value), value


def test_generate_many_with_prefix():
    values = generate_many_nrics(5, "T", rng=PythonRandomSource(seed=1))
    assert len(values) == 5
    assert all(v.startswith("T") for v in values)
    assert all(validate_nric(v) for v in values)


@pytest.mark.parametrize("count", [0, -3, None, "abc", float("nan")])
def test_generate_many_clamps_to_one(count):
    assert len(generate_many_nrics(count)) == 1


def test_generate_many_truncates_fractions():
    assert len(generate_many_nrics(2.7)) == 2


def test_info_valid():
    info = get_nric_info(" s1234567d")
    assert info.value == "S1234567D"
    assert info.first_char == "S"
    assert info.identifier == "567D"
    assert info.checksum == "D"
    assert info.is_correct_format is True
    assert info.is_valid is True


def test_info_wrong_checksum():
    info = get_nric_info("S1234567A")
    assert info.is_correct_format is True
    assert info.is_valid is False
    assert info.checksum == "A"


def test_info_malformed():
    info = get_nric_info("hello")
    assert info.to_dict() == {
        "value": "HELLO",
        "first_char": None,
        "identifier": None,
        "checksum": None,
        "is_correct_format": False,
        "is_valid": False,
    }


def test_format():
    assert format_nric("s1234567d") == "S 1234 567 D"
    assert format_nric(" bad value ") == "BAD VALUE"
