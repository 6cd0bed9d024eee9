"""Domain entities for the math practice coach."""

from .messages import (
    ChallengeMessage,
    ErrorOutMessage,
    FeedbackClearedMessage,
    FeedbackMessage,
    OutboundMessage,
    SessionEndedMessage,
    SessionStartedMessage,
    StateSnapshotMessage,
    TimeLeftMessage,
)
from .practice import (
    Challenge,
    ChallengeType,
    Difficulty,
    Operator,
    PracticeConfig,
    PracticeSessionState,
    PracticeSnapshot,
    SessionMode,
    SessionPhase,
    SessionSummary,
)
from .websocket_messages import (
    AnswerSet,
    AnswerSubmit,
    ChallengeIssued,
    ClientMessage,
    ErrorCode,
    ErrorMessage,
    FeedbackCleared,
    ModeSet,
    OperatorDisable,
    OperatorEnable,
    PracticeConfigure,
    PracticeFinish,
    QuestionCountSet,
    ResponseFeedback,
    ServerMessage,
    SessionEnded,
    SessionStarted,
    StateGet,
    StateMessage,
    TimeLeft,
    TimeSet,
)

__all__ = [
    # Practice entities
    "Challenge",
    "ChallengeType",
    "Difficulty",
    "Operator",
    "PracticeConfig",
    "PracticeSessionState",
    "PracticeSnapshot",
    "SessionMode",
    "SessionPhase",
    "SessionSummary",
    # Message entities
    "OutboundMessage",
    "SessionStartedMessage",
    "ChallengeMessage",
    "FeedbackMessage",
    "FeedbackClearedMessage",
    "TimeLeftMessage",
    "SessionEndedMessage",
    "StateSnapshotMessage",
    "ErrorOutMessage",
    # WebSocket message entities
    "ClientMessage",
    "ServerMessage",
    "PracticeConfigure",
    "AnswerSet",
    "AnswerSubmit",
    "PracticeFinish",
    "ModeSet",
    "QuestionCountSet",
    "TimeSet",
    "OperatorEnable",
    "OperatorDisable",
    "StateGet",
    "SessionStarted",
    "ChallengeIssued",
    "ResponseFeedback",
    "FeedbackCleared",
    "TimeLeft",
    "SessionEnded",
    "StateMessage",
    "ErrorMessage",
    "ErrorCode",
]
