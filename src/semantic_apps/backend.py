import asyncio
import json
import logging
import traceback
import uuid
from pathlib import Path
from typing import Any, Callable

from fastapi import FastAPI, Request, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse
from starlette.websockets import WebSocketDisconnect

from .models import ErrorMessage, encode_model
from .page import SEMANTIC_CSS, STATIC_PREFIX, semantic_page
from .session import InvalidMessageError, Session


class AppInitError(Exception):
    pass


class SessionNotFoundError(Exception):
    pass


logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))


class Backend:
    def __init__(
        self,
        ui: Any,
        server: Callable[[Session], None] | None = None,
        title: str = "Semantic App",
        dev: bool = False,
        log_level: str = "INFO",
    ):
        self.ui = ui
        self.server = server
        self.title = title
        self.dev = True if dev else False
        self.sessions: dict[str, Session] = {}
        self.backend = FastAPI()

        log_level = getattr(logging, log_level.upper())
        logging.getLogger().setLevel(log_level)
        if self.dev:
            logger.debug("Dev mode enabled!")

        self.backend.mount(STATIC_PREFIX, StaticFiles(directory=str(PACKAGE_DIR / "static")), name="semantic_static")
        self._setup_routes()

    def _build_ui(self):
        ui = self.ui() if callable(self.ui) else self.ui
        if ui is None:
            raise AppInitError("The app's ui is empty.")
        return ui

    def create_session(self) -> Session:
        session_id = str(uuid.uuid4())
        session = Session(session_id)
        if self.server is not None:
            self.server(session)
        self.sessions[session_id] = session
        logger.info(f"Creating new session {session_id}. Total sessions: {len(self.sessions)}")
        return session

    def get_session(self, session_id: str) -> Session:
        try:
            return self.sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Unknown session {session_id}") from None

    def remove_session(self, session_id: str) -> None:
        if self.sessions.pop(session_id, None) is not None:
            logger.info(f"Removing session {session_id}. Sessions remaining: {len(self.sessions)}")

    def _error_response(self, request: Request, title: str, message: str, tb: str | None = None):
        return templates.TemplateResponse(
            request,
            "error.html.j2",
            {
                "error_title": title,
                "error_message": message,
                "traceback": tb,
                "semantic_css": SEMANTIC_CSS,
            },
            status_code=500,
        )

    def _setup_routes(self):
        @self.backend.get("/")
        async def home(request: Request):
            try:
                ui = self._build_ui()
                session = self.create_session()
            except Exception as e:
                logger.error(f"Failed to initialize session: {e}")
                if self.dev:
                    return self._error_response(request, "Error in App", str(e), traceback.format_exc())
                return self._error_response(
                    request, "Internal Error", "An internal error occurred while initializing the session."
                )

            content = semantic_page(ui, title=self.title, session_id=session.session_id)
            response = HTMLResponse(content=str(content))
            response.set_cookie(key="session_id", value=session.session_id)
            return response

        @self.backend.websocket("/ws/{session_id}")
        async def websocket_endpoint(websocket: WebSocket, session_id: str):
            await websocket.accept()
            try:
                session = self.get_session(session_id)
            except SessionNotFoundError as e:
                logger.warning(str(e))
                await websocket.close(code=1008)
                return
            logger.debug(f"New WebSocket connection for session {session_id}")

            async def receive_messages():
                while True:
                    data = await websocket.receive_text()
                    logger.debug(f"Received message for session {session_id}: {data}")
                    try:
                        session.handle_message(data)
                    except InvalidMessageError as e:
                        error = ErrorMessage(error_type=type(e).__name__, message=str(e))
                        await websocket.send_text(encode_model(error))

            async def send_messages():
                while True:
                    if not session.channel.empty():
                        response = session.channel.receive_nowait()
                        logger.debug(f"Sending message to session {session_id}: {response}")
                        await websocket.send_text(json.dumps(response))
                    await asyncio.sleep(0.01)

            tasks = {asyncio.create_task(receive_messages()), asyncio.create_task(send_messages())}
            try:
                done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
                for task in pending:
                    task.cancel()
                for task in done:
                    task.result()
            except (asyncio.CancelledError, WebSocketDisconnect):
                logger.debug(f"WebSocket closed for session {session_id}")
            finally:
                for task in tasks:
                    task.cancel()
                self.remove_session(session_id)
