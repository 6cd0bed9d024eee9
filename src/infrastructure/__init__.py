"""Infrastructure layer components."""

from .asyncio_scheduler import AsyncioScheduler
from .expression_challenge_provider import ExpressionChallengeProvider
from .manual_scheduler import ManualScheduler, ManualTimer
from .sympy_answer_verifier import SympyAnswerVerifier

__all__ = [
    "AsyncioScheduler",
    "ExpressionChallengeProvider",
    "ManualScheduler",
    "ManualTimer",
    "SympyAnswerVerifier",
]
