"""Practice Coach Controller for handling session wiring and coordination."""

import logging
import random
from typing import Optional

from fastapi import WebSocket

from ..domain.entities.practice import PracticeConfig, PracticeSessionState
from ..domain.interfaces.answer_verifier import AnswerVerifier
from ..domain.interfaces.challenge_provider import ChallengeProvider
from ..domain.interfaces.scheduler import Scheduler
from ..domain.services import PracticeSessionController
from ..infrastructure.asyncio_scheduler import AsyncioScheduler
from ..infrastructure.expression_challenge_provider import ExpressionChallengeProvider
from ..infrastructure.sympy_answer_verifier import SympyAnswerVerifier
from .config import Settings
from .websocket_handler import WebSocketHandler

logger = logging.getLogger(__name__)


class PracticeCoachController:
    """
    Controller for coordinating practice coach operations.

    Builds one PracticeSessionController per connection from the settings
    and the injected collaborators, keeping the API layer thin.
    """

    def __init__(
        self,
        settings: Settings,
        answer_verifier: Optional[AnswerVerifier] = None,
        challenge_provider: Optional[ChallengeProvider] = None,
    ):
        """
        Initialize the controller.

        Args:
            settings: Application settings
            answer_verifier: Verifier shared by all sessions (defaults to SymPy)
            challenge_provider: Provider shared by all sessions; by default
                each session gets its own expression generator
        """
        self.settings = settings
        self.answer_verifier = answer_verifier or SympyAnswerVerifier(max_length=settings.max_answer_length)
        self.challenge_provider = challenge_provider
        self.active_sessions = 0

        logger.info("PracticeCoachController initialized")

    def default_state(self) -> PracticeSessionState:
        """Build the initial session state from the configured defaults."""
        return PracticeSessionState(
            config=PracticeConfig(
                difficulty=self.settings.default_difficulty,
                operators=frozenset(self.settings.default_operators),
            ),
            mode=self.settings.default_mode,
            target_question_count=self.settings.default_question_count,
            total_time_seconds=self.settings.default_total_time_seconds,
        )

    def create_session(self, scheduler: Optional[Scheduler] = None) -> PracticeSessionController:
        """Create a session controller with default state."""
        provider = self.challenge_provider or ExpressionChallengeProvider(
            random.Random(self.settings.challenge_seed)
        )
        return PracticeSessionController(
            challenge_provider=provider,
            answer_verifier=self.answer_verifier,
            scheduler=scheduler or AsyncioScheduler(),
            state=self.default_state(),
            tick_interval=self.settings.tick_interval_seconds,
            feedback_delay=self.settings.feedback_delay_ms / 1000,
        )

    async def handle_websocket_connection(self, websocket: WebSocket) -> None:
        logger.info(f"Handling new WebSocket connection from {websocket.client}")

        session = self.create_session()
        handler = WebSocketHandler(session)

        self.active_sessions += 1
        try:
            await handler.handle_websocket(websocket)
        finally:
            self.active_sessions -= 1
            logger.info(f"Practice connection from {websocket.client} closed")

    def get_health_status(self) -> dict:
        """
        Get application health status.

        Returns:
            Dict containing health status information
        """
        return {
            "status": "healthy",
            "active_sessions": self.active_sessions,
            "providers": {
                "challenge_provider": type(self.challenge_provider).__name__
                if self.challenge_provider
                else ExpressionChallengeProvider.__name__,
                "answer_verifier": type(self.answer_verifier).__name__,
            },
        }
