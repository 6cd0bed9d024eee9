"""Domain services for the math practice coach."""

from .practice_service import PracticeSessionController

__all__ = ["PracticeSessionController"]
