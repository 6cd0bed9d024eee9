"""Tests for SympyAnswerVerifier."""

import pytest

from src.domain.errors import VerificationError
from src.infrastructure.sympy_answer_verifier import SympyAnswerVerifier


@pytest.fixture
def verifier():
    return SympyAnswerVerifier()


@pytest.mark.parametrize(
    "answer,canonical",
    [
        ("14", "(3 + 4) * 2"),
        ("(3 + 4) * 2", "(3 + 4) * 2"),
        ("2 * 7", "(3 + 4) * 2"),
        ("  14 ", "(3 + 4) * 2"),
        ("-2", "3 - 5"),
        ("0.5", "1 / 2"),
        ("2(3 + 4)", "14"),
        ("3 × 4", "12"),
        ("12 ÷ 4", "3"),
        ("−3", "2 - 5"),
    ],
)
def test_equal_answers(verifier, answer, canonical):
    assert verifier.equals(answer, canonical) is True


@pytest.mark.parametrize(
    "answer,canonical",
    [
        ("15", "(3 + 4) * 2"),
        ("3 + 4 * 2", "(3 + 4) * 2"),
        ("0.33", "1 / 3"),
        ("1 / 0", "7"),
    ],
)
def test_unequal_answers(verifier, answer, canonical):
    assert verifier.equals(answer, canonical) is False


@pytest.mark.parametrize(
    "answer",
    [
        "",
        "   ",
        "seven",
        "x + 1",
        "__import__('os')",
        "2 ** 1000000",
        "2 ^ 3",
        "3 +",
        "2 3",
        "()",
    ],
)
def test_malformed_answers_raise(verifier, answer):
    with pytest.raises(VerificationError):
        verifier.equals(answer, "5")


def test_length_limit(verifier):
    long_answer = " + ".join(["1"] * 40)

    with pytest.raises(VerificationError, match="longer than"):
        verifier.equals(long_answer, "40")

    assert SympyAnswerVerifier(max_length=200).equals(long_answer, "40") is True


def test_none_answer_raises(verifier):
    with pytest.raises(VerificationError):
        verifier.equals(None, "1")
