"""
FastAPI app for a browser-rendered board: forwards clicks / commands into one local GameSession
and answers with the full state needed to redraw.

Serve with any ASGI server using the factory, e.g. `uvicorn --factory src.api.app:create_app`.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.models import (
    ClickRequest,
    OrientationRequest,
    PromotionChoiceRequest,
    SessionResponse,
)
from src.core.config import SessionConfig, configure_logging
from src.core.exceptions import GameError
from src.interaction.session import GameSession
from src.services.session_service import SessionService


def create_app(
    service: Optional[SessionService] = None, config: Optional[SessionConfig] = None
) -> FastAPI:
    config = config or SessionConfig()
    configure_logging(config.log_level)
    session_service = service or SessionService(GameSession(config=config))

    app = FastAPI(title="chess-interaction", version="0.1.0")

    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # Handlers are async so they all run on the event loop thread: session mutations never interleave.
    @app.get("/state", response_model=SessionResponse)
    async def get_state() -> SessionResponse:
        return session_service.get_state()

    @app.post("/click", response_model=SessionResponse)
    async def click(request: ClickRequest) -> SessionResponse:
        return session_service.click(request)

    @app.post("/promotion", response_model=SessionResponse)
    async def choose_promotion(request: PromotionChoiceRequest) -> SessionResponse:
        return session_service.choose_promotion(request)

    @app.post("/undo", response_model=SessionResponse)
    async def undo() -> SessionResponse:
        return session_service.undo()

    @app.post("/reset", response_model=SessionResponse)
    async def reset() -> SessionResponse:
        return session_service.reset()

    @app.post("/orientation", response_model=SessionResponse)
    async def set_orientation(request: OrientationRequest) -> SessionResponse:
        return session_service.set_orientation(request)

    @app.post("/flip", response_model=SessionResponse)
    async def flip() -> SessionResponse:
        return session_service.flip_orientation()

    return app
