"""Outbound message entities."""

from dataclasses import dataclass, field
from typing import Optional

from .practice import Challenge, PracticeSnapshot, SessionSummary
from .websocket_messages import (
    ChallengeIssued,
    ErrorCode,
    ErrorMessage,
    FeedbackCleared,
    ResponseFeedback,
    SessionEnded,
    SessionStarted,
    StateMessage,
    TimeLeft,
)


class OutboundMessage:
    """Base class for outbound messages."""

    pass


@dataclass
class SessionStartedMessage(OutboundMessage):
    """Message indicating a session has been configured and is running."""

    snapshot: PracticeSnapshot
    session_started: SessionStarted = field(init=False)

    def __post_init__(self):
        self.session_started = SessionStarted(state=self.snapshot)


@dataclass
class ChallengeMessage(OutboundMessage):
    """Message containing a newly issued challenge."""

    challenge: Challenge
    challenge_issued: ChallengeIssued = field(init=False)

    def __post_init__(self):
        self.challenge_issued = ChallengeIssued(question=self.challenge.display_form)


@dataclass
class FeedbackMessage(OutboundMessage):
    """Message containing feedback for a submitted answer."""

    correct: bool
    streak: int
    correct_count: int
    feedback: ResponseFeedback = field(init=False)

    def __post_init__(self):
        self.feedback = ResponseFeedback(
            correct=self.correct,
            streak=self.streak,
            correct_count=self.correct_count,
        )


@dataclass
class FeedbackClearedMessage(OutboundMessage):
    """Message indicating the feedback window has elapsed."""

    feedback_cleared: FeedbackCleared = field(default_factory=FeedbackCleared)


@dataclass
class TimeLeftMessage(OutboundMessage):
    """Message containing the remaining session time."""

    seconds: int
    time_left: TimeLeft = field(init=False)

    def __post_init__(self):
        self.time_left = TimeLeft(seconds=self.seconds)


@dataclass
class SessionEndedMessage(OutboundMessage):
    """Message indicating session has ended."""

    reason: str
    summary: Optional[SessionSummary] = None
    session_ended: SessionEnded = field(init=False)

    def __post_init__(self):
        self.session_ended = SessionEnded(reason=self.reason, summary=self.summary)


@dataclass
class ErrorOutMessage(OutboundMessage):
    """Message containing an error."""

    code: ErrorCode
    message: str
    error: ErrorMessage = field(init=False)

    def __post_init__(self):
        self.error = ErrorMessage(code=self.code, message=self.message)


@dataclass
class StateSnapshotMessage(OutboundMessage):
    """Message containing a snapshot of the session state."""

    snapshot: PracticeSnapshot
    state: StateMessage = field(init=False)

    def __post_init__(self):
        self.state = StateMessage(state=self.snapshot)
