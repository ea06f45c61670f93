"""Application configuration and settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blockwatch.models.rpc import RpcConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "blockwatch"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = Field(default=8000, description="Server port")

    # API
    api_prefix: str = "/api/v1"

    # Chronik indexer
    chronik_url: str = "https://chronik.fabien.cash"
    chronik_ws_url: str = Field(
        default="",
        description="Websocket endpoint; derived from chronik_url when empty",
    )
    chronik_timeout: float = 10.0

    # Subscription
    watched_address: str = ""
    subscription_script_type: str = "p2pkh"
    subscription_script_hash: str = ""
    subscribe_on_startup: bool = True

    # Telegram
    telegram_bot_token: SecretStr = Field(default=SecretStr(""))
    telegram_api_url: str = "https://api.telegram.org"
    telegram_channel_id: str = ""
    tg_parse_mode: str = "markdown"
    tg_disable_web_page_preview: bool = True
    block_explorer_url: str = "https://explorer.e.cash"

    # Avalanche RPC
    avalanche_rpc_url: str = "http://localhost:8332"
    avalanche_rpc_user: str = ""
    avalanche_rpc_password: SecretStr = Field(default=SecretStr(""))
    avalanche_rpc_timeout: float = Field(
        default=1.0, gt=0, description="isfinalblock request timeout in seconds"
    )

    # Block handling
    block_handler: Literal["state", "notify"] = "state"

    @field_validator("chronik_url", "block_explorer_url", "telegram_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs."""
        return v.rstrip("/")

    @property
    def websocket_url(self) -> str:
        """Chronik websocket URL, derived from the HTTP URL when not set."""
        if self.chronik_ws_url:
            return self.chronik_ws_url
        if self.chronik_url.startswith("https://"):
            return "wss://" + self.chronik_url[len("https://"):] + "/ws"
        if self.chronik_url.startswith("http://"):
            return "ws://" + self.chronik_url[len("http://"):] + "/ws"
        return self.chronik_url + "/ws"

    def rpc_config(self) -> RpcConfig:
        """Build the avalanche RPC config."""
        return RpcConfig(
            url=self.avalanche_rpc_url,
            user=self.avalanche_rpc_user,
            password=self.avalanche_rpc_password.get_secret_value(),
            timeout=self.avalanche_rpc_timeout,
        )

    def tg_msg_options(self) -> dict[str, Any]:
        """Options passed along with every Telegram message."""
        return {
            "parse_mode": self.tg_parse_mode,
            "disable_web_page_preview": self.tg_disable_web_page_preview,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
