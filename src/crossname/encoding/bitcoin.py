"""Bitcoin segwit address codec (BIP-173 bech32 / BIP-350 bech32m)."""

from __future__ import annotations

from typing import ClassVar

import bech32

from crossname.core.exceptions import InvalidAddressError, UnsupportedWitnessVersionError
from crossname.core.types import AddressEncoding
from crossname.encoding.base import AddressCodec

MAINNET_HRP = "bc"

# Script opcodes: OP_0, OP_1..OP_16
OP_0 = 0x00
OP_1 = 0x51
OP_16 = 0x60


class BitcoinAddressCodec(AddressCodec):
    """
    Formats a hex-encoded scriptPubKey as a native segwit address.

    Layout: <version opcode> <program length> <program bytes>

    Version 0 programs are encoded as bech32, versions 1-16 as bech32m.
    """

    ENCODING: ClassVar[AddressEncoding] = AddressEncoding.BITCOIN

    def __init__(self, hrp: str = MAINNET_HRP) -> None:
        self.hrp = hrp

    def encode(self, raw_address: str) -> str:
        script = self._decode_hex(raw_address)
        if len(script) < 2:
            raise InvalidAddressError(
                "Invalid raw Bitcoin address format: script too short",
                self.encoding.value,
                details={"raw_address": raw_address},
            )

        version = self.witness_version(script[0])
        program_length = script[1]
        program = script[2 : 2 + program_length]
        if len(program) != program_length:
            raise InvalidAddressError(
                f"Invalid witness program length: {program_length}",
                self.encoding.value,
                details={"raw_address": raw_address},
            )

        # None when the program breaks BIP-141 size rules (2-40 bytes, 20 or 32 for v0)
        address = bech32.encode(self.hrp, version, list(program))
        if address is None:
            raise InvalidAddressError(
                f"Invalid witness program length: {program_length}",
                self.encoding.value,
                details={"raw_address": raw_address, "witness_version": version},
            )
        return address

    @staticmethod
    def witness_version(opcode: int) -> int:
        """Map a version opcode to its witness version (OP_0 -> 0, OP_n -> n)."""
        if opcode == OP_0:
            return 0
        if OP_1 <= opcode <= OP_16:
            return opcode - (OP_1 - 1)
        raise UnsupportedWitnessVersionError(
            f"Unsupported witness version: 0x{opcode:02x}",
            opcode,
        )
