"""Address decoding interface."""

from abc import ABC, abstractmethod

from blockwatch.core.exceptions import AddressDecodeError


class AddressDecoder(ABC):
    """Decodes an address to the script the indexer indexes it under."""

    @abstractmethod
    def decode(self, address: str) -> tuple[str, str]:
        """
        Decode an address.

        Returns:
            Tuple of (script_type, script_hash).

        Raises:
            AddressDecodeError: If the address is not recognized.
        """
        ...


class StaticAddressDecoder(AddressDecoder):
    """Decoder backed by a fixed address to script mapping."""

    def __init__(self, scripts: dict[str, tuple[str, str]]) -> None:
        self._scripts = dict(scripts)

    def decode(self, address: str) -> tuple[str, str]:
        try:
            return self._scripts[address]
        except KeyError:
            raise AddressDecodeError(address) from None
