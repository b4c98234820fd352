import pytest

from nationalid.core.config import IdentifierConfig
from nationalid.core.exceptions import GenerationError
from nationalid.core.random_source import PythonRandomSource, ScriptedRandomSource
from nationalid.schemes.nino import (
    FIRST_LETTERS,
    PROHIBITED_PREFIXES,
    SECOND_LETTERS,
    SUFFIX_LETTERS,
    generate_multiple_ninos,
    generate_nino,
    validate_nino,
)


def test_constant_sets():
    assert PROHIBITED_PREFIXES == {"GB", "BG", "NK", "KN", "TN", "NT", "ZZ"}
    assert len(FIRST_LETTERS) == 20
    assert len(SECOND_LETTERS) == 19
    assert SUFFIX_LETTERS == ("A", "B", "C", "D")
    for letter in "DFIQUV":
        assert letter not in FIRST_LETTERS
        assert letter not in SECOND_LETTERS
    assert "O" in FIRST_LETTERS and "O" not in SECOND_LETTERS


@pytest.mark.parametrize("value", ["AB123456C", "AB123456", "ab 12 34 56 c", " ZY123456D\t", "OA000000A"])
def test_validate_accepts(value):
    assert validate_nino(value) is True


@pytest.mark.parametrize("value", [
    "GB123456C",
    "ZZ123456A",
    "DA123456A",
    "AO123456A",
    "AB123456E",
    "AB12345C",
    "AB1234567",
    "A1123456C",
    "",
    "   ",
])
def test_validate_rejects(value):
    assert validate_nino(value) is False


def test_validate_rejects_non_strings():
    assert validate_nino(None) is False
    assert validate_nino(123456) is False
    assert validate_nino(["AB123456C"]) is False


def test_every_denylisted_prefix_is_rejected():
    for prefix in PROHIBITED_PREFIXES:
        assert validate_nino(prefix + "123456A") is False


def test_generate_resamples_denylisted_prefix():
    # G (index 4) + B (index 1) is denylisted; A + B is drawn next.
    rng = ScriptedRandomSource([4, 1, 0, 1, 1, 2, 3, 4, 5, 6, 2])
    assert generate_nino(rng=rng) == "AB123456C"
    assert rng.remaining == 0


def test_generate_fails_closed_when_attempts_exhausted():
    config = IdentifierConfig(max_prefix_attempts=2)
    rng = ScriptedRandomSource([4, 1, 4, 1])
    with pytest.raises(GenerationError):
        generate_nino(rng=rng, config=config)


def test_generate_round_trip():
    rng = PythonRandomSource(seed=99)
    for _ in range(500):
        value = generate_nino(rng=rng)
        assert len(value) == 9
        assert value[:2] not in PROHIBITED_PREFIXES
        assert value[-1] in SUFFIX_LETTERS
        assert validate_nino(value), value


def test_generate_multiple_exact_count():
    values = generate_multiple_ninos(4, rng=PythonRandomSource(seed=3))
    assert len(values) == 4
    assert all(validate_nino(v) for v in values)


@pytest.mark.parametrize("count", [0, -2])
def test_generate_multiple_non_positive_is_empty(count):
    assert generate_multiple_ninos(count) == []


def test_generate_multiple_truncates_float_count():
    assert len(generate_multiple_ninos(2.0)) == 2
    assert len(generate_multiple_ninos(3.9)) == 3
