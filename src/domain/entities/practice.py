"""Practice session entities for the math practice coach."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    """Challenge difficulty, ordered from easiest to hardest."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def rank(self) -> int:
        """Position in the easy -> hard ordering."""
        return list(Difficulty).index(self)


class Operator(str, Enum):
    """Arithmetic operators a challenge may use."""
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"


class ChallengeType(str, Enum):
    """Kinds of challenge a session may draw from."""
    EXPRESSION = "expression"


class SessionMode(str, Enum):
    """Which termination trigger is armed for a session."""
    BY_TIME = "time"
    BY_QUESTION_COUNT = "question_count"


class SessionPhase(str, Enum):
    """Phase of the practice session state machine."""
    IDLE = "idle"
    NEUTRAL = "neutral"
    FEEDBACK = "feedback"
    TERMINATED = "terminated"

    @property
    def is_active(self) -> bool:
        return self in (SessionPhase.NEUTRAL, SessionPhase.FEEDBACK)


DEFAULT_OPERATORS = frozenset({Operator.ADDITION, Operator.SUBTRACTION})


class PracticeConfig(BaseModel):
    """Options for a single practice session."""

    model_config = ConfigDict(frozen=True)

    difficulty: Difficulty = Difficulty.NORMAL
    operators: frozenset[Operator] = DEFAULT_OPERATORS
    challenge_types: frozenset[ChallengeType] = frozenset({ChallengeType.EXPRESSION})

    def with_operator(self, operator: Operator) -> "PracticeConfig":
        return self.model_copy(update={"operators": self.operators | {operator}})

    def without_operator(self, operator: Operator) -> "PracticeConfig":
        return self.model_copy(update={"operators": self.operators - {operator}})


class Challenge(BaseModel):
    """A single arithmetic question."""

    model_config = ConfigDict(frozen=True)

    display_form: str
    canonical_form: str


class PracticeSessionState(BaseModel):
    """Mutable state of a practice session.

    Created once with defaults and reconfigured for every new session.
    Configuration fields (config, mode, target_question_count,
    total_time_seconds) survive termination; counters do not.
    """

    config: PracticeConfig = Field(default_factory=PracticeConfig)
    current_challenge: Optional[Challenge] = None
    current_answer: str = ""
    streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)
    correct_count: int = Field(default=0, ge=0)
    questions_served: int = Field(default=0, ge=0)
    showing_feedback: bool = False
    mode: SessionMode = SessionMode.BY_TIME
    target_question_count: int = Field(default=10, gt=0)
    total_time_seconds: int = Field(default=10, ge=0)
    time_left_seconds: int = Field(default=0, ge=0)
    phase: SessionPhase = SessionPhase.IDLE

    model_config = ConfigDict(validate_assignment=True)


class SessionSummary(BaseModel):
    """Result of a session, captured just before its counters are reset."""

    reason: str
    correct_count: int
    streak: int
    best_streak: int
    questions_served: int
    time_left_seconds: int


class PracticeSnapshot(BaseModel):
    """Read-only projection of the session state for callers and UIs."""

    question: Optional[str] = None
    answer: str
    streak: int
    operators: list[Operator]
    difficulty: Difficulty
    practice_mode: SessionMode
    practice_question_count: int
    practice_time: int
    practice_time_left: int
    practice_correct_question_count: int
    showing_feedback: bool
    phase: SessionPhase
