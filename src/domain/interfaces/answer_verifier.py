"""Answer verifier interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AnswerVerifier(Protocol):

    def equals(self, answer: str, canonical_form: str) -> bool:
        """Check a user's answer against a challenge's canonical expression.

        Raises:
            VerificationError: If the answer cannot be parsed or evaluated.
        """
        ...
