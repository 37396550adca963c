"""Static chain registry with lookups by chain ID, short name and CAIP-2 key."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from crossname.core.exceptions import RegistryError
from crossname.core.models import ChainInfo

logger = logging.getLogger(__name__)

# ENSIP-11: EVM coin types are the chain ID with the MSB set, except mainnet
ENSIP11_EVM_FLAG = 0x80000000
ETH_MAINNET_COIN_TYPE = 60

_CHAIN_LIST = TypeAdapter(list[ChainInfo])


def evm_coin_type(chain_id: int) -> int:
    """Return the ENSIP-11 coin type for an EVM chain ID."""
    if chain_id == 1:
        return ETH_MAINNET_COIN_TYPE
    return ENSIP11_EVM_FLAG | chain_id


class ChainRegistry:
    """
    Immutable set of chain entries with three derived lookup maps.

    - by_chain_id: canonical chain ID (int for EVM, str for manual chains)
    - by_short_name: lowercase short name
    - by_namespace_reference: "namespace:reference"

    All maps are built once in the constructor and exposed read-only.
    """

    def __init__(self, entries: Iterable[ChainInfo]) -> None:
        self._chains: tuple[ChainInfo, ...] = tuple(entries)

        by_chain_id: dict[int | str, ChainInfo] = {}
        by_short_name: dict[str, ChainInfo] = {}
        by_namespace_reference: dict[str, ChainInfo] = {}

        for chain in self._chains:
            self._insert(by_chain_id, chain.chain_id, chain, "chain ID")
            self._insert(by_short_name, chain.short_name, chain, "short name")
            if chain.caip2 is not None:
                self._insert(by_namespace_reference, chain.caip2, chain, "CAIP-2 key")

        self._by_chain_id: Mapping[int | str, ChainInfo] = MappingProxyType(by_chain_id)
        self._by_short_name: Mapping[str, ChainInfo] = MappingProxyType(by_short_name)
        self._by_namespace_reference: Mapping[str, ChainInfo] = MappingProxyType(
            by_namespace_reference
        )

    @staticmethod
    def _insert(target: dict, key: int | str, chain: ChainInfo, label: str) -> None:
        if key in target:
            raise RegistryError(
                f"Duplicate {label} in chain registry: {key}",
                details={"key": key, "short_name": chain.short_name},
            )
        target[key] = chain

    @property
    def chains(self) -> tuple[ChainInfo, ...]:
        return self._chains

    @property
    def by_chain_id(self) -> Mapping[int | str, ChainInfo]:
        return self._by_chain_id

    @property
    def by_short_name(self) -> Mapping[str, ChainInfo]:
        return self._by_short_name

    @property
    def by_namespace_reference(self) -> Mapping[str, ChainInfo]:
        return self._by_namespace_reference

    def get_by_namespace_reference(self, namespace: str, reference: str) -> ChainInfo | None:
        return self._by_namespace_reference.get(f"{namespace}:{reference}")

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, short_name: object) -> bool:
        return isinstance(short_name, str) and short_name.lower() in self._by_short_name

    def __repr__(self) -> str:
        return f"ChainRegistry(chains={len(self._chains)})"


def load_registry(path: str | Path | None = None) -> ChainRegistry:
    """
    Load and validate a chain dataset.

    Args:
        path: JSON file with a list of chain entries. Defaults to the
            dataset packaged with crossname.

    Raises:
        RegistryError: If the file is unreadable or an entry is invalid.
    """
    try:
        if path is None:
            raw = resources.files("crossname.chains").joinpath("data/chains.json").read_text()
        else:
            raw = Path(path).read_text(encoding="utf-8")
        entries = _CHAIN_LIST.validate_python(json.loads(raw))
    except (OSError, json.JSONDecodeError) as e:
        raise RegistryError(f"Failed to read chain dataset: {e}", details={"path": str(path)}) from e
    except PydanticValidationError as e:
        raise RegistryError(
            f"Invalid chain dataset: {e.error_count()} validation error(s)",
            details={"path": str(path), "errors": e.errors()},
        ) from e

    registry = ChainRegistry(entries)
    logger.debug("Loaded chain registry with %d chains", len(registry))
    return registry


@lru_cache
def get_default_registry() -> ChainRegistry:
    """Get the cached registry built from the packaged dataset."""
    return load_registry()
