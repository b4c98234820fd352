import pytest

from nationalid.core.random_source import PythonRandomSource, ScriptedRandomSource
from nationalid.schemes.hkid import generate_hkid, hkid_check_character, validate_hkid


def test_check_character_boundaries():
    assert hkid_check_character(0) == "0"
    assert hkid_check_character(1) == "A"
    assert hkid_check_character(2) == "9"
    assert hkid_check_character(10) == "1"


def test_generate_double_letter_exact():
    rng = ScriptedRandomSource([10, 11, 1, 2, 3, 4, 5, 6])
    assert generate_hkid(False, rng=rng) == "AB1234569"
    assert rng.remaining == 0


def test_generate_single_letter_exact():
    # Blank first position counts as 36, so only one letter is drawn.
    rng = ScriptedRandomSource([12, 6, 6, 8, 6, 6, 8])
    assert generate_hkid(True, rng=rng) == "C6686689"


def test_generate_unforced_uses_coin():
    assert generate_hkid(None, rng=ScriptedRandomSource([1, 12, 6, 6, 8, 6, 6, 8])) == "C6686689"
    assert generate_hkid(None, rng=ScriptedRandomSource([0, 10, 11, 1, 2, 3, 4, 5, 6])) == "AB1234569"


def test_remainder_zero_gives_zero():
    # 10*9 + 11*8 + 6*7 = 220, 220 % 11 == 0
    assert generate_hkid(False, rng=ScriptedRandomSource([10, 11, 6, 0, 0, 0, 0, 0])) == "AB6000000"
    assert validate_hkid("AB6000000") is True


def test_remainder_one_gives_a():
    # 178 + 3*7 = 199, 199 % 11 == 1
    assert generate_hkid(False, rng=ScriptedRandomSource([10, 11, 3, 0, 0, 0, 0, 0])) == "AB300000A"
    assert validate_hkid("AB300000A") is True


@pytest.mark.parametrize("value", ["AB1234569", "C6686689", "A1234563", "AB6000000", "AB300000A"])
def test_validate_known_good(value):
    assert validate_hkid(value) is True


@pytest.mark.parametrize("value", [
    "",
    "AB1234568",
    "A1234560",
    "ab1234569",
    "AB12345",
    "1234567",
    "ABC1234569",
    "AB1234569 ",
    "AB123456(9)",
])
def test_validate_rejects(value):
    assert validate_hkid(value) is False


def test_validate_rejects_non_strings():
    assert validate_hkid(None) is False
    assert validate_hkid(12345678) is False


def test_generate_round_trip():
    rng = PythonRandomSource(seed=2024)
    for _ in range(300):
        value = generate_hkid(rng=rng)
        assert len(value) in (8, 9)
        assert validate_hkid(value), value


def test_forced_prefix_lengths():
    rng = PythonRandomSource(seed=5)
    assert all(len(generate_hkid(True, rng=rng)) == 8 for _ in range(50))
    assert all(len(generate_hkid(False, rng=rng)) == 9 for _ in range(50))


@pytest.mark.parametrize("value", ["AB123456908", "AB123456916"])
def test_trailing_characters_join_the_weighted_sum(value):
    # Only the start of the string is format-checked; the last character is
    # the check character for everything before it.
    assert validate_hkid(value) is True


@pytest.mark.parametrize("value", ["AB123456907", "AB123456915", "AB1234569X"])
def test_trailing_characters_with_wrong_check_are_rejected(value):
    assert validate_hkid(value) is False
