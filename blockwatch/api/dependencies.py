"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from blockwatch.config import Settings, get_settings
from blockwatch.constants import BlockHandlerStrategy
from blockwatch.core.indexer import IndexerClient
from blockwatch.core.notifier import Notifier
from blockwatch.core.store import StateStore
from blockwatch.core.transport import Connection
from blockwatch.providers.chronik import ChronikClient
from blockwatch.providers.telegram import TelegramNotifier
from blockwatch.services.block_handler import (
    BlockHandler,
    HandlerContext,
    NotifyOnlyBlockHandler,
    StateMutatingBlockHandler,
)
from blockwatch.services.classifier import EventDispatcher
from blockwatch.store.memory import MemoryStateStore


_indexer_instance: IndexerClient | None = None
_store_instance: StateStore | None = None
_notifier_instance: Notifier | None = None
_dispatcher_instance: EventDispatcher | None = None
_connection: Connection | None = None


def get_indexer(
    settings: Annotated[Settings, Depends(get_settings)]
) -> IndexerClient:
    """Get or create indexer client instance."""
    global _indexer_instance

    if _indexer_instance is None:
        _indexer_instance = ChronikClient(
            base_url=settings.chronik_url,
            timeout=settings.chronik_timeout,
        )

    return _indexer_instance


def get_state_store() -> StateStore:
    """Get or create state store instance."""
    global _store_instance

    if _store_instance is None:
        _store_instance = MemoryStateStore()

    return _store_instance


def get_notifier(
    settings: Annotated[Settings, Depends(get_settings)]
) -> Notifier | None:
    """Get or create the Telegram notifier; None when no bot token is set."""
    global _notifier_instance

    token = settings.telegram_bot_token.get_secret_value()
    if _notifier_instance is None and token:
        _notifier_instance = TelegramNotifier(
            bot_token=token,
            api_url=settings.telegram_api_url,
        )

    return _notifier_instance


def build_block_handler(settings: Settings) -> BlockHandler:
    """Create the configured block handler strategy."""
    if settings.block_handler == BlockHandlerStrategy.NOTIFY.value:
        return NotifyOnlyBlockHandler(
            explorer_url=settings.block_explorer_url,
            msg_options=settings.tg_msg_options(),
        )
    return StateMutatingBlockHandler()


def get_dispatcher(
    settings: Annotated[Settings, Depends(get_settings)]
) -> EventDispatcher:
    """Get or create the websocket event dispatcher."""
    global _dispatcher_instance

    if _dispatcher_instance is None:
        context = HandlerContext(
            indexer=get_indexer(settings),
            store=get_state_store(),
            notifier=get_notifier(settings),
            channel_id=settings.telegram_channel_id,
            rpc=settings.rpc_config(),
        )
        _dispatcher_instance = EventDispatcher(context, build_block_handler(settings))

    return _dispatcher_instance


def set_connection(connection: Connection | None) -> None:
    """Remember the live websocket connection."""
    global _connection
    _connection = connection


def get_connection() -> Connection | None:
    """Get the live websocket connection, if any."""
    return _connection


async def cleanup_dependencies() -> None:
    """Cleanup dependency instances on shutdown."""
    global _indexer_instance, _store_instance, _notifier_instance, _dispatcher_instance, _connection

    if _connection:
        await _connection.close()
        _connection = None

    if _indexer_instance:
        await _indexer_instance.close()
        _indexer_instance = None

    if _notifier_instance:
        await _notifier_instance.close()
        _notifier_instance = None

    if _store_instance:
        await _store_instance.close()
        _store_instance = None

    _dispatcher_instance = None
