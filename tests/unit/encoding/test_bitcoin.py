"""Tests for the Bitcoin segwit address codec."""

from __future__ import annotations

import bech32
import pytest

from crossname.core.exceptions import InvalidAddressError, UnsupportedWitnessVersionError
from crossname.encoding.bitcoin import BitcoinAddressCodec
from tests.helpers import (
    P2TR_ADDRESS,
    P2TR_SCRIPT,
    P2WPKH_ADDRESS,
    P2WPKH_SCRIPT,
    P2WSH_ADDRESS,
    P2WSH_SCRIPT,
    V16_ADDRESS,
    V16_SCRIPT,
)


@pytest.fixture
def codec() -> BitcoinAddressCodec:
    return BitcoinAddressCodec()


# ============================================================================
# Codec Tests
# ============================================================================


class TestBitcoinAddressCodec:
    """Tests for BitcoinAddressCodec."""

    @pytest.mark.parametrize(
        "script,expected",
        [
            (P2WPKH_SCRIPT, P2WPKH_ADDRESS),  # v0, 20-byte program, bech32
            (P2WSH_SCRIPT, P2WSH_ADDRESS),  # v0, 32-byte program, bech32
            (P2TR_SCRIPT, P2TR_ADDRESS),  # v1 taproot, bech32m
            (V16_SCRIPT, V16_ADDRESS),  # v16, bech32m
        ],
    )
    def test_encode(self, codec: BitcoinAddressCodec, script: str, expected: str):
        assert codec.encode(script) == expected

    @pytest.mark.parametrize("script", [P2WPKH_SCRIPT, P2TR_SCRIPT, V16_SCRIPT])
    def test_decodes_to_same_program(self, codec: BitcoinAddressCodec, script: str):
        """Addresses decode back to the witness version and program they came from."""
        raw = bytes.fromhex(script[2:])
        version, program = bech32.decode("bc", codec.encode(script))
        assert version == BitcoinAddressCodec.witness_version(raw[0])
        assert bytes(program) == raw[2:]

    def test_uppercase_hex(self, codec: BitcoinAddressCodec):
        assert codec.encode("0x" + P2WPKH_SCRIPT[2:].upper()) == P2WPKH_ADDRESS

    def test_custom_hrp(self):
        codec = BitcoinAddressCodec(hrp="tb")
        assert codec.encode(P2WPKH_SCRIPT).startswith("tb1q")

    @pytest.mark.parametrize(
        "opcode,version",
        [(0x00, 0), (0x51, 1), (0x52, 2), (0x60, 16)],
    )
    def test_witness_version(self, opcode: int, version: int):
        assert BitcoinAddressCodec.witness_version(opcode) == version

    @pytest.mark.parametrize("opcode", [0x61, 0x50, 0x01, 0x4F, 0xFF])
    def test_unsupported_witness_version(self, codec: BitcoinAddressCodec, opcode: int):
        script = f"0x{opcode:02x}14" + "75" * 20
        with pytest.raises(UnsupportedWitnessVersionError, match="Unsupported witness version") as exc_info:
            codec.encode(script)
        assert exc_info.value.version_byte == opcode

    @pytest.mark.parametrize(
        "raw",
        [
            P2WPKH_SCRIPT[2:],  # No prefix
            "0x",  # Empty script
            "0x00",  # No length byte
            "0x0014751e",  # Truncated program
            "0x0001ff",  # Program below 2 bytes
            "0x0029" + "00" * 41,  # Program above 40 bytes
            "0x0019" + "00" * 25,  # v0 program neither 20 nor 32 bytes
            "0xzz14",  # Not hex
        ],
    )
    def test_invalid(self, codec: BitcoinAddressCodec, raw: str):
        with pytest.raises(InvalidAddressError):
            codec.encode(raw)
