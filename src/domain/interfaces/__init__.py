"""Domain interfaces for the math practice coach."""

from .answer_verifier import AnswerVerifier
from .challenge_provider import ChallengeProvider
from .scheduler import Scheduler, TimerHandle

__all__ = ["AnswerVerifier", "ChallengeProvider", "Scheduler", "TimerHandle"]
