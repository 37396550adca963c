"""
Human-friendly chain aliases.

Each alias maps to a chainlist short name
(https://github.com/ethereum-lists/chains/tree/master/_data/chains) or to
one of the manually curated non-EVM entries.
"""

from __future__ import annotations

from types import MappingProxyType

from crossname.chains.registry import ChainRegistry, get_default_registry

DISPLAY_NAME_MAPPINGS = MappingProxyType(
    {
        # Major L1s
        "ethereum": "eth",
        "polygon": "pol",
        "bnb": "bnb",
        "avalanche": "avax",
        "celo": "celo",
        # Major L2s and superchains
        "arbitrum": "arb1",
        "optimism": "oeth",
        "base": "base",
        "zkevm": "zkevm",
        "linea": "linea",
        "zora": "zora",
        "scroll": "scr",
        # Non-EVM
        "solana": "solana",
        "bitcoin": "bitcoin",
    }
)


def resolve_display_name(display_name: str, registry: ChainRegistry | None = None) -> str:
    """
    Map a display name to its registered short name.

    Returns the lowercased, trimmed input when there is no alias or the
    alias target is not a registered short name.
    """
    if registry is None:
        registry = get_default_registry()
    normalized = display_name.strip().lower()
    mapped = DISPLAY_NAME_MAPPINGS.get(normalized)
    if mapped is not None and mapped in registry.by_short_name:
        return mapped
    return normalized


def get_available_display_names() -> list[str]:
    return list(DISPLAY_NAME_MAPPINGS)


def get_display_name_mapping(display_name: str) -> str | None:
    """Return the short name an alias points to, if any."""
    return DISPLAY_NAME_MAPPINGS.get(display_name.strip().lower())
