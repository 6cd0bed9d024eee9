"""Practice session controller: the session state machine."""

import asyncio
import logging
from typing import Optional

from ..entities.messages import (
    ChallengeMessage,
    FeedbackClearedMessage,
    FeedbackMessage,
    OutboundMessage,
    SessionEndedMessage,
    SessionStartedMessage,
    TimeLeftMessage,
)
from ..entities.practice import (
    Operator,
    PracticeConfig,
    PracticeSessionState,
    PracticeSnapshot,
    SessionMode,
    SessionPhase,
    SessionSummary,
)
from ..errors import ConfigurationError, TimerStateError, VerificationError
from ..interfaces.answer_verifier import AnswerVerifier
from ..interfaces.challenge_provider import ChallengeProvider
from ..interfaces.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0
FEEDBACK_DELAY_SECONDS = 0.35


class PracticeSessionController:
    """
    Per-session controller that owns all practice session logic.

    This controller owns:
    - Session state (config, challenge, answer, counters, countdown)
    - The periodic tick timer for timed sessions (at most one live handle)
    - The one-shot timer that clears the feedback flag
    - Emitting events to subscribers via an async queue

    Every operation is synchronous and runs to completion on the event loop
    thread, so each transition is atomic with respect to observers.
    """

    def __init__(
        self,
        challenge_provider: ChallengeProvider,
        answer_verifier: AnswerVerifier,
        scheduler: Scheduler,
        state: Optional[PracticeSessionState] = None,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        feedback_delay: float = FEEDBACK_DELAY_SECONDS,
    ):
        self.challenge_provider = challenge_provider
        self.answer_verifier = answer_verifier
        self.scheduler = scheduler
        self.state: PracticeSessionState = state or PracticeSessionState()
        self.tick_interval = tick_interval
        self.feedback_delay = feedback_delay

        self.outbound_queue: asyncio.Queue[OutboundMessage] = asyncio.Queue()

        self._timer_handle: Optional[TimerHandle] = None
        self._feedback_handle: Optional[TimerHandle] = None
        # Bumped on configure and finish; late callbacks from an older
        # generation are dropped.
        self._generation: int = 0
        # Mode, target and total for the next configure
        self._pending_settings: dict = {
            "mode": self.state.mode,
            "target_question_count": self.state.target_question_count,
            "total_time_seconds": self.state.total_time_seconds,
        }

    @property
    def has_active_timer(self) -> bool:
        return self._timer_handle is not None

    @property
    def pending_settings(self) -> dict:
        """Mode, target count and total time the next configure will use."""
        return dict(self._pending_settings)

    @property
    def is_active(self) -> bool:
        return self.state.phase.is_active

    # ===== Configuration =====

    def configure(self, config: PracticeConfig) -> None:
        """
        Start a practice session with the given options.

        Args:
            config: Difficulty, operators and challenge types for the session

        Raises:
            ConfigurationError: If no operator is enabled
        """
        if not config.operators:
            raise ConfigurationError("At least one operator must be enabled")

        self._cancel_timers()
        self._generation += 1

        state = self.state
        state.config = config
        for name, value in self._pending_settings.items():
            setattr(state, name, value)
        state.time_left_seconds = state.total_time_seconds
        state.streak = 0
        state.best_streak = 0
        state.correct_count = 0
        state.questions_served = 0
        state.current_answer = ""
        state.showing_feedback = False
        state.phase = SessionPhase.NEUTRAL

        logger.info(
            f"Configuring practice session: difficulty={config.difficulty.value}, "
            f"operators={sorted(op.value for op in config.operators)}, mode={state.mode.value}"
        )

        self.next_challenge()

        if state.mode == SessionMode.BY_TIME:
            self._arm_timer()

        self._emit(SessionStartedMessage(self.snapshot()))

    def set_operator_enabled(self, operator: Operator) -> None:
        self.state.config = self.state.config.with_operator(operator)

    def set_operator_disabled(self, operator: Operator) -> None:
        """Remove an operator from the allowed set.

        Raises:
            ConfigurationError: If it is the last remaining operator
        """
        remaining = self.state.config.operators - {operator}
        if not remaining:
            raise ConfigurationError(f"Cannot disable {operator.value}: it is the last enabled operator")
        self.state.config = self.state.config.without_operator(operator)

    def set_mode(self, mode: SessionMode) -> None:
        self._stage_setting("mode", mode)

    def set_target_question_count(self, count: int) -> None:
        if count <= 0:
            raise ConfigurationError(f"Question count must be positive, got {count}")
        self._stage_setting("target_question_count", count)

    def set_total_time(self, seconds: int) -> None:
        if seconds < 0:
            raise ConfigurationError(f"Practice time cannot be negative, got {seconds}")
        self._stage_setting("total_time_seconds", seconds)

    def _stage_setting(self, name: str, value) -> None:
        """Record a session setting for the next configure.

        A running session keeps the mode, target and total it was started
        with; without one the value shows up in the state right away.
        """
        self._pending_settings[name] = value
        if self.is_active:
            logger.debug(f"Staged {name}={value} for the next session")
        else:
            setattr(self.state, name, value)

    # ===== Question lifecycle =====

    def next_challenge(self) -> None:
        """Replace the current challenge with a freshly generated one."""
        config = self.state.config
        challenge = self.challenge_provider.generate(config.difficulty, config.operators)
        self.state.current_challenge = challenge
        self.state.questions_served += 1
        logger.debug(f"Issued challenge {challenge.canonical_form}")
        self._emit(ChallengeMessage(challenge))

    def set_answer(self, text: str) -> None:
        self.state.current_answer = text

    def submit_answer(self) -> Optional[bool]:
        """
        Check the current answer against the current challenge.

        Malformed answers count as incorrect.

        Returns:
            True if correct, False if incorrect, None if no session is active
        """
        if not self.is_active or self.state.current_challenge is None:
            logger.warning(f"Ignoring answer submission in phase {self.state.phase.value}")
            return None

        answer = self.state.current_answer
        try:
            correct = self.answer_verifier.equals(answer, self.state.current_challenge.canonical_form)
        except VerificationError as e:
            logger.info(f"Could not verify answer {answer!r}, treating as incorrect: {e}")
            correct = False

        if correct:
            self._on_correct()
        else:
            self._on_incorrect()
        return correct

    # ===== Feedback state machine =====

    def _on_correct(self) -> None:
        state = self.state
        state.correct_count += 1
        state.streak += 1
        state.best_streak = max(state.best_streak, state.streak)
        state.current_answer = ""
        self._show_feedback(correct=True)

        if (
            state.mode == SessionMode.BY_QUESTION_COUNT
            and state.correct_count >= state.target_question_count
        ):
            logger.info(f"Reached target of {state.target_question_count} questions")
            self.finish(reason="question_count_reached")
            return

        self.next_challenge()

    def _on_incorrect(self) -> None:
        self.state.streak = 0
        self.state.current_answer = ""
        self._show_feedback(correct=False)

    def _show_feedback(self, correct: bool) -> None:
        self.state.showing_feedback = True
        self.state.phase = SessionPhase.FEEDBACK
        self._emit(FeedbackMessage(correct, self.state.streak, self.state.correct_count))

        # Restart the window so it always ends feedback_delay after the last submission
        if self._feedback_handle is not None:
            self._feedback_handle.cancel()
        generation = self._generation
        self._feedback_handle = self.scheduler.call_later(
            self.feedback_delay, lambda: self._clear_feedback(generation)
        )

    def _clear_feedback(self, generation: int) -> None:
        if generation != self._generation or self.state.phase != SessionPhase.FEEDBACK:
            logger.debug("Dropping stale feedback clear")
            return
        self._feedback_handle = None
        self.state.showing_feedback = False
        self.state.phase = SessionPhase.NEUTRAL
        self._emit(FeedbackClearedMessage())

    # ===== Termination =====

    def tick(self) -> None:
        """Advance the countdown by one second, finishing when it runs out."""
        if not self.is_active:
            logger.debug(f"Ignoring tick in phase {self.state.phase.value}")
            return

        time_left = self.state.time_left_seconds - 1
        if time_left <= 0:
            logger.info("Practice time is up")
            self.finish(reason="time_up")
        else:
            self.state.time_left_seconds = time_left
            self._emit(TimeLeftMessage(time_left))

    def finish(self, reason: str = "finished") -> Optional[SessionSummary]:
        """
        End the session and reset its counters.

        Configuration is kept for the next session. Calling finish on an
        already terminated session does nothing.

        Args:
            reason: Why the session ended

        Returns:
            The summary of the session, or None if it was already terminated
        """
        if self.state.phase == SessionPhase.TERMINATED:
            logger.debug("Session already terminated")
            return None

        state = self.state
        summary = SessionSummary(
            reason=reason,
            correct_count=state.correct_count,
            streak=state.streak,
            best_streak=state.best_streak,
            questions_served=state.questions_served,
            time_left_seconds=state.time_left_seconds,
        )

        self._cancel_timers()
        self._generation += 1

        state.streak = 0
        state.correct_count = 0
        state.time_left_seconds = 0
        state.current_answer = ""
        state.showing_feedback = False
        state.phase = SessionPhase.TERMINATED

        logger.info(
            f"Practice session finished ({reason}): {summary.correct_count} correct, "
            f"best streak {summary.best_streak}"
        )
        self._emit(SessionEndedMessage(reason=reason, summary=summary))
        return summary

    # ===== Timers =====

    def _arm_timer(self) -> None:
        if self._timer_handle is not None:
            raise TimerStateError("A practice timer is already running")
        self._timer_handle = self.scheduler.call_every(self.tick_interval, self.tick)

    def _cancel_timers(self) -> None:
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None
        if self._feedback_handle is not None:
            self._feedback_handle.cancel()
            self._feedback_handle = None

    # ===== Observable state =====

    def snapshot(self) -> PracticeSnapshot:
        """Get a read-only view of the session state."""
        state = self.state
        return PracticeSnapshot(
            question=state.current_challenge.display_form if state.current_challenge else None,
            answer=state.current_answer,
            streak=state.streak,
            operators=sorted(state.config.operators, key=lambda op: list(Operator).index(op)),
            difficulty=state.config.difficulty,
            practice_mode=state.mode,
            practice_question_count=state.target_question_count,
            practice_time=state.total_time_seconds,
            practice_time_left=state.time_left_seconds,
            practice_correct_question_count=state.correct_count,
            showing_feedback=state.showing_feedback,
            phase=state.phase,
        )

    def _emit(self, message: OutboundMessage) -> None:
        self.outbound_queue.put_nowait(message)
