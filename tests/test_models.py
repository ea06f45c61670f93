"""Tests for Pydantic models and settings."""

from datetime import timezone

import pytest
from pydantic import ValidationError

from blockwatch.config import Settings
from blockwatch.models.block import BlockDetails, ParsedBlock
from blockwatch.models.events import BlockConnected, SubscriptionTarget
from blockwatch.models.rpc import RpcConfig, RpcResponse
from tests.fakes import BLOCK_HASH, make_block_details


class TestBlockModels:
    """Tests for block models."""

    def test_chronik_field_names(self) -> None:
        """Test chronik camelCase fields are accepted."""
        details = BlockDetails.model_validate(
            {
                "blockInfo": {"hash": BLOCK_HASH, "height": 1, "numTxs": 1, "blockSize": 285},
                "txs": [{"txid": BLOCK_HASH, "isCoinbase": True, "outputs": []}],
            }
        )

        assert details.block_info.num_txs == 1
        assert details.block_info.block_size == 285
        assert details.txs[0].is_coinbase is True

    def test_parsed_block_without_coinbase(self) -> None:
        """Test parsing a block whose txs were not included."""
        details = make_block_details(num_txs=0)
        parsed = ParsedBlock.from_details(details)

        assert parsed.coinbase_scripts == []
        assert parsed.coinbase_value == 0
        assert parsed.timestamp.tzinfo == timezone.utc

    def test_num_txs_falls_back_to_tx_list(self) -> None:
        """Test tx count comes from the list when the header lacks it."""
        details = make_block_details(num_txs=3)
        details.block_info.num_txs = 0

        assert ParsedBlock.from_details(details).num_txs == 3


class TestEventModels:
    """Tests for event envelope models."""

    def test_block_connected_by_field_name(self) -> None:
        """Test BlockConnected can be built in Python."""
        event = BlockConnected(block_hash=BLOCK_HASH)

        assert event.type == "BlockConnected"

    def test_block_hash_length(self) -> None:
        """Test block hashes must be 64 hex chars."""
        with pytest.raises(ValidationError):
            BlockConnected(block_hash="abc")

    def test_subscription_target_requires_hash(self) -> None:
        """Test an empty script hash is rejected."""
        with pytest.raises(ValidationError):
            SubscriptionTarget(script_type="p2pkh", script_hash="")


class TestRpcModels:
    """Tests for RPC models."""

    def test_default_timeout(self) -> None:
        """Test the default isfinalblock timeout is one second."""
        assert RpcConfig(url="http://localhost:8332").timeout == 1.0

    def test_timeout_must_be_positive(self) -> None:
        """Test a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            RpcConfig(url="http://localhost:8332", timeout=0)

    def test_error_response(self) -> None:
        """Test an error response parses."""
        response = RpcResponse.model_validate(
            {"result": None, "error": {"code": -8, "message": "bad"}, "id": "isfinalblock"}
        )

        assert response.error.code == -8


class TestSettings:
    """Tests for Settings."""

    def test_websocket_url_derived(self) -> None:
        """Test the websocket URL follows the chronik URL."""
        settings = Settings(chronik_url="https://chronik.example.com/", _env_file=None)

        assert settings.chronik_url == "https://chronik.example.com"
        assert settings.websocket_url == "wss://chronik.example.com/ws"

    def test_websocket_url_explicit(self) -> None:
        """Test an explicit websocket URL wins."""
        settings = Settings(chronik_ws_url="ws://localhost:9000/ws", _env_file=None)

        assert settings.websocket_url == "ws://localhost:9000/ws"

    def test_rpc_config(self) -> None:
        """Test the RPC config is built from settings."""
        settings = Settings(
            avalanche_rpc_url="http://node:8332",
            avalanche_rpc_user="user",
            avalanche_rpc_password="secret",
            _env_file=None,
        )
        rpc = settings.rpc_config()

        assert rpc.url == "http://node:8332"
        assert rpc.password == "secret"
        assert rpc.timeout == 1.0

    def test_block_handler_choices(self) -> None:
        """Test only known block handler strategies are accepted."""
        assert Settings(block_handler="notify", _env_file=None).block_handler == "notify"
        with pytest.raises(ValidationError):
            Settings(block_handler="other", _env_file=None)
