"""EVM address codec (EIP-55 checksummed hex)."""

from __future__ import annotations

from typing import ClassVar

from eth_utils import is_hex, to_checksum_address

from crossname.core.exceptions import InvalidAddressError
from crossname.core.types import AddressEncoding
from crossname.encoding.base import AddressCodec

# "0x" + 20 bytes
ADDRESS_HEX_LENGTH = 42


class EvmAddressCodec(AddressCodec):
    """
    Formats EVM addresses.

    Resolvers return either the bare 20 address bytes or a longer padded
    payload; only the first 20 bytes after the prefix are kept.
    """

    ENCODING: ClassVar[AddressEncoding] = AddressEncoding.EVM

    def encode(self, raw_address: str) -> str:
        if not isinstance(raw_address, str) or not raw_address.startswith("0x"):
            raise self._invalid(raw_address)

        candidate = raw_address[:ADDRESS_HEX_LENGTH]
        if len(candidate) != ADDRESS_HEX_LENGTH or not is_hex(candidate):
            raise self._invalid(raw_address)

        try:
            return to_checksum_address(candidate)
        except ValueError as e:
            raise self._invalid(raw_address) from e

    def _invalid(self, raw_address: str) -> InvalidAddressError:
        return InvalidAddressError(
            "Invalid raw EVM address format",
            self.encoding.value,
            details={"raw_address": raw_address},
        )
