"""FastAPI application factory and main entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from blockwatch.api.dependencies import (
    cleanup_dependencies,
    get_dispatcher,
    set_connection,
)
from blockwatch.api.routes import router
from blockwatch.config import Settings, get_settings
from blockwatch.core.address import AddressDecoder, StaticAddressDecoder
from blockwatch.providers.websocket import WebsocketTransport
from blockwatch.services.subscription import (
    build_subscription_target,
    initialize_websocket,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def default_address_decoder(settings: Settings) -> AddressDecoder:
    """Decoder resolving the watched address to the configured script."""
    return StaticAddressDecoder(
        {
            settings.watched_address: (
                settings.subscription_script_type,
                settings.subscription_script_hash,
            )
        }
    )


async def start_subscription(settings: Settings, decoder: AddressDecoder) -> None:
    """Subscribe to the chronik websocket for the watched address."""
    target = build_subscription_target(settings.watched_address, decoder)
    connection = await initialize_websocket(
        WebsocketTransport(settings.websocket_url),
        target,
        get_dispatcher(settings),
    )
    set_connection(connection)


def create_app(decoder: AddressDecoder | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager for startup and shutdown events."""
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Block handler: {settings.block_handler}")

        if settings.subscribe_on_startup:
            await start_subscription(settings, decoder or default_address_decoder(settings))
        else:
            logger.warning("Websocket subscription disabled")

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        await cleanup_dependencies()
        logger.info("Cleanup complete")

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Chronik websocket listener that handles new blocks one at a time "
            "and checks avalanche finality."
        ),
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(router)

    @app.get("/api", tags=["root"])
    async def api_info() -> dict[str, str]:
        """API information endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health",
        }

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "blockwatch.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
