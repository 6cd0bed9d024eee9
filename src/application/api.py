"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .controller import PracticeCoachController

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

controller = PracticeCoachController(settings=settings)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return controller.get_health_status()


@app.get("/defaults")
async def get_defaults():
    """Default session options a client starts from."""
    return controller.default_state().model_dump(
        include={"config", "mode", "target_question_count", "total_time_seconds"},
        mode="json",
    )


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for practice sessions.

    Each connection owns one practice session. The client sends JSON
    control messages (practice.configure, answer.set, answer.submit,
    practice.finish, mode.set, question_count.set, time.set,
    operator.enable, operator.disable, state.get) and receives JSON
    events (session.started, challenge, feedback, feedback.cleared,
    time.left, session.ended, state, error).

    The session is finished when the client disconnects.
    """
    await websocket.accept()

    try:
        await controller.handle_websocket_connection(websocket)
    except Exception as e:
        logger.error(f"Error handling websocket connection: {e}", exc_info=True)
