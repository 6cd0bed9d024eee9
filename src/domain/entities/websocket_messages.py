"""WebSocket message models for the math practice coach."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .practice import Difficulty, Operator, SessionMode, SessionSummary, PracticeSnapshot


# ===== Client → Server Messages =====


class PracticeConfigure(BaseModel):
    """Start (or restart) a practice session."""

    type: Literal["practice.configure"] = "practice.configure"
    difficulty: Difficulty = Difficulty.NORMAL
    operators: list[Operator] = Field(default_factory=lambda: [Operator.ADDITION, Operator.SUBTRACTION])


class AnswerSet(BaseModel):
    """Replace the current answer text."""

    type: Literal["answer.set"] = "answer.set"
    answer: str = ""


class AnswerSubmit(BaseModel):
    """Submit the current answer, optionally replacing it first."""

    type: Literal["answer.submit"] = "answer.submit"
    answer: Optional[str] = None


class PracticeFinish(BaseModel):
    """End the running session."""

    type: Literal["practice.finish"] = "practice.finish"


class ModeSet(BaseModel):
    type: Literal["mode.set"] = "mode.set"
    mode: SessionMode


class QuestionCountSet(BaseModel):
    type: Literal["question_count.set"] = "question_count.set"
    count: int


class TimeSet(BaseModel):
    type: Literal["time.set"] = "time.set"
    seconds: int


class OperatorEnable(BaseModel):
    type: Literal["operator.enable"] = "operator.enable"
    operator: Operator


class OperatorDisable(BaseModel):
    type: Literal["operator.disable"] = "operator.disable"
    operator: Operator


class StateGet(BaseModel):
    """Ask for a snapshot of the session state."""

    type: Literal["state.get"] = "state.get"


# Union type for all client messages
ClientMessage = Annotated[
    Union[
        PracticeConfigure,
        AnswerSet,
        AnswerSubmit,
        PracticeFinish,
        ModeSet,
        QuestionCountSet,
        TimeSet,
        OperatorEnable,
        OperatorDisable,
        StateGet,
    ],
    Field(discriminator="type"),
]


# ===== Server → Client Messages =====


class SessionStarted(BaseModel):
    """Session configured and running."""

    type: Literal["session.started"] = "session.started"
    state: PracticeSnapshot


class ChallengeIssued(BaseModel):
    """A new question to show."""

    type: Literal["challenge"] = "challenge"
    question: str


class ResponseFeedback(BaseModel):
    """Feedback after an answer submission."""

    type: Literal["feedback"] = "feedback"
    correct: bool
    streak: int
    correct_count: int


class FeedbackCleared(BaseModel):
    """The feedback window has elapsed."""

    type: Literal["feedback.cleared"] = "feedback.cleared"


class TimeLeft(BaseModel):
    """Countdown update for timed sessions."""

    type: Literal["time.left"] = "time.left"
    seconds: int


class SessionEnded(BaseModel):
    """Session ended notification from server."""

    type: Literal["session.ended"] = "session.ended"
    reason: str
    summary: Optional[SessionSummary] = None


class StateMessage(BaseModel):
    """Snapshot of the session state."""

    type: Literal["state"] = "state"
    state: PracticeSnapshot


class ErrorCode(str, Enum):
    """Error codes for WebSocket error messages."""

    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMessage(BaseModel):
    """Error message from server."""

    type: Literal["error"] = "error"
    code: ErrorCode
    message: str


# Union type for all server messages
ServerMessage = Annotated[
    Union[
        SessionStarted,
        ChallengeIssued,
        ResponseFeedback,
        FeedbackCleared,
        TimeLeft,
        SessionEnded,
        StateMessage,
        ErrorMessage,
    ],
    Field(discriminator="type"),
]
