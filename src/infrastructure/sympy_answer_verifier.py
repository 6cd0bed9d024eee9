"""SymPy implementation of AnswerVerifier."""

import logging
import re

import sympy as sp
from sympy.parsing.sympy_parser import (
    parse_expr,
    rationalize,
    standard_transformations,
)

from ..domain.errors import VerificationError

logger = logging.getLogger(__name__)

TRANSFORMS = standard_transformations + (
    rationalize,  # 0.5 -> 1/2, so decimals compare exactly
)

# Plain arithmetic only: no names, no exponentiation
_ALLOWED_INPUT = re.compile(r"^[0-9\s+\-*/().]*$")

DEFAULT_MAX_LENGTH = 64


class SympyAnswerVerifier:
    """
    Checks answers by symbolic equality with SymPy.

    Input is restricted to digits, whitespace, ``+ - * /``, parentheses and
    decimal points before it reaches the parser, so user text is never
    evaluated as general Python or SymPy syntax.
    """

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
        self.max_length = max_length

    def equals(self, answer: str, canonical_form: str) -> bool:
        user_expr = self.parse(answer)
        target_expr = self.parse(canonical_form)
        difference = sp.simplify(user_expr - target_expr)
        logger.debug(f"Comparing {user_expr} with {target_expr}: difference {difference}")
        return difference == 0

    def parse(self, text: str) -> sp.Expr:
        """Parse arithmetic text into a SymPy expression.

        Raises:
            VerificationError: If the text is empty, too long, uses
                disallowed syntax, or does not parse.
        """
        prepared = _prep_expr(text)
        if not prepared:
            raise VerificationError("Answer is empty")
        if len(prepared) > self.max_length:
            raise VerificationError(f"Answer is longer than {self.max_length} characters")
        if not _ALLOWED_INPUT.match(prepared) or "**" in prepared:
            raise VerificationError(f"Answer contains unsupported characters: {text!r}")

        try:
            expr = parse_expr(prepared, transformations=TRANSFORMS, evaluate=True)
        except Exception as e:
            raise VerificationError(f"Could not parse answer {text!r}") from e

        if not isinstance(expr, sp.Expr):
            raise VerificationError(f"Answer is not an arithmetic expression: {text!r}")
        return expr


def _prep_expr(text: str) -> str:
    if text is None:
        return ""

    text = text.strip()

    # Normalize symbols
    text = text.replace("×", "*")
    text = text.replace("·", "*")
    text = text.replace("÷", "/")
    text = text.replace("−", "-")      # unicode minus
    text = text.replace("–", "-")      # en dash

    # 2(3+4) -> 2*(3+4), )( -> )*(
    text = re.sub(r"(\d)\s*\(", r"\1*(", text)
    text = re.sub(r"\)\s*\(", r")*(", text)

    return text
