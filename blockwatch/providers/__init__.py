"""Indexer, notifier and transport implementations."""

from blockwatch.providers.chronik import ChronikClient
from blockwatch.providers.telegram import TelegramNotifier
from blockwatch.providers.websocket import WebsocketConnection, WebsocketTransport

__all__ = [
    "ChronikClient",
    "TelegramNotifier",
    "WebsocketConnection",
    "WebsocketTransport",
]
