"""Arithmetic expression implementation of ChallengeProvider."""

import logging
import random
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from ..domain.entities.practice import Challenge, Difficulty, Operator
from ..domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DifficultyProfile:
    """Operand range and expression length for a difficulty level."""

    min_operand: int
    max_operand: int
    min_terms: int
    max_terms: int


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(min_operand=1, max_operand=10, min_terms=2, max_terms=2),
    Difficulty.NORMAL: DifficultyProfile(min_operand=1, max_operand=20, min_terms=2, max_terms=3),
    Difficulty.HARD: DifficultyProfile(min_operand=2, max_operand=50, min_terms=3, max_terms=4),
}

_PRECEDENCE = {
    Operator.ADDITION: 1,
    Operator.SUBTRACTION: 1,
    Operator.MULTIPLICATION: 2,
    Operator.DIVISION: 2,
}

_LATEX_SYMBOLS = {
    Operator.ADDITION: "+",
    Operator.SUBTRACTION: "-",
    Operator.MULTIPLICATION: "\\times",
    Operator.DIVISION: "\\div",
}

_LITERAL_PRECEDENCE = 3


@dataclass(frozen=True)
class _Term:
    canonical: str
    latex: str
    value: Fraction
    precedence: int


class ExpressionChallengeProvider:
    """
    Generates integer arithmetic expressions.

    Expressions are built left to right from random operands and the allowed
    operators. Operand size and expression length grow with difficulty.
    Divisions always divide exactly, so every answer is an integer. Easy
    challenges avoid negative results where the operands allow it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the provider.

        Args:
            rng: Random number generator; pass a seeded one for reproducible challenges
        """
        self._rng = rng or random.Random()

    def generate(self, difficulty: Difficulty, operators: frozenset[Operator]) -> Challenge:
        if not operators:
            raise ConfigurationError("Cannot generate a challenge without operators")

        profile = DIFFICULTY_PROFILES[difficulty]
        # Stable order so a seeded rng always picks the same operators
        allowed = sorted(operators, key=lambda op: list(Operator).index(op))

        term_count = self._rng.randint(profile.min_terms, profile.max_terms)
        expression = self._literal(self._rng.randint(profile.min_operand, profile.max_operand))

        for _ in range(term_count - 1):
            operator = self._rng.choice(allowed)
            operand = self._pick_operand(operator, expression.value, difficulty, profile)
            expression = self._combine(expression, operator, self._literal(operand))

        logger.debug(f"Generated {difficulty.value} challenge {expression.canonical} = {expression.value}")
        return Challenge(display_form=expression.latex, canonical_form=expression.canonical)

    def _pick_operand(
        self,
        operator: Operator,
        current: Fraction,
        difficulty: Difficulty,
        profile: DifficultyProfile,
    ) -> int:
        if operator == Operator.DIVISION:
            value = int(current)
            divisors = [d for d in range(1, profile.max_operand + 1) if value % d == 0]
            if len(divisors) > 1:
                divisors.remove(1)
            return self._rng.choice(divisors)

        if (
            operator == Operator.SUBTRACTION
            and difficulty == Difficulty.EASY
            and current >= profile.min_operand
        ):
            return self._rng.randint(profile.min_operand, min(profile.max_operand, int(current)))

        return self._rng.randint(profile.min_operand, profile.max_operand)

    @staticmethod
    def _literal(value: int) -> _Term:
        return _Term(
            canonical=str(value),
            latex=str(value),
            value=Fraction(value),
            precedence=_LITERAL_PRECEDENCE,
        )

    @staticmethod
    def _combine(left: _Term, operator: Operator, right: _Term) -> _Term:
        precedence = _PRECEDENCE[operator]
        left_canonical, left_latex = left.canonical, left.latex
        if left.precedence < precedence:
            left_canonical = f"({left_canonical})"
            left_latex = f"({left_latex})"

        if operator == Operator.ADDITION:
            value = left.value + right.value
        elif operator == Operator.SUBTRACTION:
            value = left.value - right.value
        elif operator == Operator.MULTIPLICATION:
            value = left.value * right.value
        else:
            value = left.value / right.value

        return _Term(
            canonical=f"{left_canonical} {operator.value} {right.canonical}",
            latex=f"{left_latex} {_LATEX_SYMBOLS[operator]} {right.latex}",
            value=value,
            precedence=precedence,
        )
