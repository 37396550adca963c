"""Core enums and type definitions."""

from enum import StrEnum


class Namespace(StrEnum):
    """CAIP-2 namespaces known to the registry."""

    EIP155 = "eip155"
    BIP122 = "bip122"
    SOLANA = "solana"


class AddressEncoding(StrEnum):
    """Native address formats the formatter can produce."""

    EVM = "evm"  # EIP-55 checksummed hex
    BITCOIN = "bitcoin"  # bech32 / bech32m segwit
    SOLANA = "solana"  # plain base58
