"""Challenge provider interface."""

from typing import Protocol, runtime_checkable

from ..entities.practice import Challenge, Difficulty, Operator


@runtime_checkable
class ChallengeProvider(Protocol):
    """Protocol for producing practice challenges.

    Implementations must be pure functions of their inputs from the point of
    view of the session: no side effects the controller can observe.
    """

    def generate(self, difficulty: Difficulty, operators: frozenset[Operator]) -> Challenge:
        """Generate a challenge.

        Args:
            difficulty: Difficulty level of the challenge.
            operators: Non-empty set of operators the challenge may use.

        Returns:
            Challenge: The generated challenge.
        """
        ...
