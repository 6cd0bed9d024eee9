import asyncio
import logging

from pydantic import TypeAdapter, ValidationError
from starlette.websockets import WebSocket, WebSocketDisconnect

from ..domain.entities import OutboundMessage
from ..domain.entities.messages import (
    ChallengeMessage,
    ErrorOutMessage,
    FeedbackClearedMessage,
    FeedbackMessage,
    SessionEndedMessage,
    SessionStartedMessage,
    StateSnapshotMessage,
    TimeLeftMessage,
)
from ..domain.entities.practice import PracticeConfig
from ..domain.entities.websocket_messages import (
    AnswerSet,
    AnswerSubmit,
    ClientMessage,
    ErrorCode,
    ModeSet,
    OperatorDisable,
    OperatorEnable,
    PracticeConfigure,
    PracticeFinish,
    QuestionCountSet,
    StateGet,
    TimeSet,
)
from ..domain.errors import ConfigurationError
from ..domain.services import PracticeSessionController

logger = logging.getLogger(__name__)

_client_message_adapter = TypeAdapter(ClientMessage)


class WebSocketHandler:

    def __init__(self, session: PracticeSessionController):
        self._session = session

    async def handle_websocket(self, websocket: WebSocket) -> None:
        # Note: websocket.accept() is called by the API endpoint before this
        send_task = asyncio.create_task(self._send_loop(websocket))
        receive_task = asyncio.create_task(self._receive_loop(websocket))
        done, pending = await asyncio.wait(
            {send_task, receive_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
        try:
            for task in done:
                exc = task.exception()
                if exc:
                    raise exc
        except WebSocketDisconnect:
            logger.info(f"WebSocket disconnected: {websocket.client}")
        except Exception as e:
            logger.error(f"WebSocket error: {e}", exc_info=True)
        finally:
            if self._session.is_active:
                self._session.finish(reason="disconnected")
            for t in (send_task, receive_task):
                if not t.done():
                    t.cancel()
            await asyncio.gather(send_task, receive_task, return_exceptions=True)

            try:
                await websocket.close()
            except Exception as e:
                logger.debug(f"WebSocket already closed: {e}")
            logger.info(f"WebSocket connection closed: {websocket.client}")

    async def _send_loop(self, websocket: WebSocket) -> None:
        while True:
            item: OutboundMessage = await self._session.outbound_queue.get()
            logger.debug(f"_send_loop got message: {type(item).__name__}")

            match item:
                case SessionStartedMessage():
                    payload = item.session_started
                case ChallengeMessage():
                    payload = item.challenge_issued
                case FeedbackMessage():
                    payload = item.feedback
                case FeedbackClearedMessage():
                    payload = item.feedback_cleared
                case TimeLeftMessage():
                    payload = item.time_left
                case SessionEndedMessage():
                    payload = item.session_ended
                case StateSnapshotMessage():
                    payload = item.state
                case ErrorOutMessage():
                    payload = item.error
                case _:
                    raise ValueError(f"Unknown OutboundMessage type: {type(item)}")

            await websocket.send_text(payload.model_dump_json())

    async def _receive_loop(self, websocket: WebSocket) -> None:
        """Receive messages from client and apply them to the session."""
        while True:
            text = await websocket.receive_text()
            try:
                message = _client_message_adapter.validate_json(text)
            except ValidationError as e:
                logger.warning(f"Invalid client message: {e}")
                self._emit_error(ErrorCode.INVALID_MESSAGE, "Message could not be parsed")
                continue

            try:
                self._handle_control_message(message)
            except ConfigurationError as e:
                logger.warning(f"Rejected configuration: {e}")
                self._emit_error(ErrorCode.INVALID_CONFIGURATION, str(e))
            except Exception as e:
                logger.error(f"Error handling {message.type}: {e}", exc_info=True)
                self._emit_error(ErrorCode.INTERNAL_ERROR, f"Could not handle {message.type}")

    def _handle_control_message(self, message) -> None:
        """Dispatch a parsed client message to the session controller."""
        session = self._session

        match message:
            case PracticeConfigure():
                config = PracticeConfig(
                    difficulty=message.difficulty,
                    operators=frozenset(message.operators),
                )
                session.configure(config)
            case AnswerSet():
                session.set_answer(message.answer)
            case AnswerSubmit():
                if message.answer is not None:
                    session.set_answer(message.answer)
                session.submit_answer()
            case PracticeFinish():
                session.finish(reason="finished")
            case ModeSet():
                session.set_mode(message.mode)
            case QuestionCountSet():
                session.set_target_question_count(message.count)
            case TimeSet():
                session.set_total_time(message.seconds)
            case OperatorEnable():
                session.set_operator_enabled(message.operator)
            case OperatorDisable():
                session.set_operator_disabled(message.operator)
            case StateGet():
                session.outbound_queue.put_nowait(StateSnapshotMessage(session.snapshot()))
            case _:
                logger.warning(f"Unknown control message type: {type(message).__name__}")

    def _emit_error(self, code: ErrorCode, text: str) -> None:
        self._session.outbound_queue.put_nowait(ErrorOutMessage(code, text))
