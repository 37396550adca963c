"""Solana address codec (plain base58, no checksum)."""

from __future__ import annotations

from typing import ClassVar

import base58

from crossname.core.types import AddressEncoding
from crossname.encoding.base import AddressCodec


class SolanaAddressCodec(AddressCodec):
    """Formats the raw public key bytes as base58."""

    ENCODING: ClassVar[AddressEncoding] = AddressEncoding.SOLANA

    def encode(self, raw_address: str) -> str:
        return base58.b58encode(self._decode_hex(raw_address)).decode("ascii")
