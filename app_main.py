from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


PROJECT_ROOT = Path(__file__).resolve().parent
API_CODE_PATH = PROJECT_ROOT / "api-code"
if str(API_CODE_PATH) not in sys.path:
    sys.path.insert(0, str(API_CODE_PATH))

from env_loader import load_local_env  # noqa: E402
from routers import build_chat_router, build_health_router  # noqa: E402
from services import GatewayClient, RelayService  # noqa: E402
from settings import Settings, get_settings  # noqa: E402


load_local_env()
settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger("voice-relay")


def create_app(
    app_settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the relay application; ``transport`` substitutes the gateway in tests."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Voice Assistant API running on port %s", app_settings.port)
        logger.info("Gateway: %s", app_settings.gateway_url)
        yield

    application = FastAPI(
        lifespan=lifespan,
        title="Voice Assistant API",
        version="0.1.0",
        description="Relays chat messages to the upstream gateway.",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    relay_service = RelayService(GatewayClient(app_settings, transport=transport))

    application.include_router(build_chat_router(relay_service))
    application.include_router(build_health_router())

    return application


app = create_app(settings)


def main(app_settings: Settings) -> None:
    """Serve the relay; a failed bind is reported before the process exits."""
    import uvicorn

    try:
        uvicorn.run(create_app(app_settings), host=app_settings.host, port=app_settings.port)
    except SystemExit as exc:
        if exc.code:
            logger.error(
                "Voice Assistant API failed to start on %s:%s",
                app_settings.host,
                app_settings.port,
            )
        raise


if __name__ == "__main__":
    main(settings)
