"""Abstract address codec and shared hex helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from crossname.core.exceptions import InvalidAddressError
from crossname.core.types import AddressEncoding


class AddressCodec(ABC):
    """
    Renders a raw address payload returned by an ENS resolver into the
    chain's native address format.
    """

    ENCODING: ClassVar[AddressEncoding]

    @property
    def encoding(self) -> AddressEncoding:
        return self.ENCODING

    @abstractmethod
    def encode(self, raw_address: str) -> str:
        """
        Convert a `0x`-prefixed hex payload into a native address string.

        Raises:
            AddressEncodingError: If the payload has the wrong shape
        """
        ...

    def _decode_hex(self, raw_address: str) -> bytes:
        """Decode a `0x`-prefixed hex string, raising InvalidAddressError otherwise."""
        if not isinstance(raw_address, str) or not raw_address.startswith("0x"):
            raise InvalidAddressError(
                f"Invalid raw {self.encoding.value} address format",
                self.encoding.value,
                details={"raw_address": raw_address},
            )
        try:
            return bytes.fromhex(raw_address[2:])
        except ValueError as e:
            raise InvalidAddressError(
                f"Invalid raw {self.encoding.value} address format: {e}",
                self.encoding.value,
                details={"raw_address": raw_address},
            ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(encoding={self.encoding.value})"
