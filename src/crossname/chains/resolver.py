"""Chain specification resolution against the chain registry."""

from __future__ import annotations

import logging

from crossname.chains.display_names import resolve_display_name
from crossname.chains.registry import ChainRegistry, get_default_registry
from crossname.core.exceptions import (
    ChainLookupError,
    ChainSpecError,
    InvalidChainIdError,
    UnknownChainIdError,
    UnknownChainReferenceError,
    UnknownChainSpecError,
)
from crossname.core.models import ChainInfo, ResolvedChain
from crossname.core.types import Namespace
from crossname.parsing.caip import parse_caip2_chain_id

logger = logging.getLogger(__name__)


def resolve_chain(chain_spec: str, registry: ChainRegistry | None = None) -> ResolvedChain:
    """
    Resolve a chain specification to registry information.

    Accepted forms:
      - decimal chain IDs: "1", "8453"
      - chainlist short names: "eth", "oeth", "base"
      - display names: "ethereum", "optimism", "solana"
      - CAIP-2 identifiers: "eip155:8453", "bip122:000000000019d6689c085ae165831e93"

    Example:
        resolve_chain("base")
        # ResolvedChain(chain_id=8453, coin_type=2147492101, chain_info=...)

    Raises:
        ChainSpecError: Empty or non-string spec
        InvalidCAIP2FormatError: Malformed CAIP-2 string
        UnknownChainSpecError: No lookup strategy matched
    """
    if not chain_spec or not isinstance(chain_spec, str) or not chain_spec.strip():
        raise ChainSpecError("Chain specification must be a non-empty string")

    if registry is None:
        registry = get_default_registry()
    resolved_spec = resolve_display_name(chain_spec, registry)

    # InvalidCAIP2FormatError propagates from here
    caip2 = parse_caip2_chain_id(resolved_spec, registry, strict=True)
    try:
        return _resolve_caip2(caip2.namespace, caip2.reference, registry)
    except ChainLookupError as e:
        logger.debug("CAIP-2 lookup failed for %r: %s", chain_spec, e.message)

    if chain := registry.by_short_name.get(resolved_spec):
        logger.debug("Resolved %r by short name", chain_spec)
        return _to_resolved(chain)

    # TODO: ENS chain names (base.l2.eth) once ERC-7785 chain registries are deployed

    if resolved_spec.isdecimal() and resolved_spec.isascii():
        if chain := registry.by_chain_id.get(int(resolved_spec)):
            logger.debug("Resolved %r by chain ID", chain_spec)
            return _to_resolved(chain)

    raise UnknownChainSpecError(f"Unknown chain specification: {chain_spec}", chain_spec)


def _resolve_caip2(namespace: str, reference: str, registry: ChainRegistry) -> ResolvedChain:
    if namespace == Namespace.EIP155:
        chain_id = int(reference) if reference.isdecimal() and reference.isascii() else 0
        if chain_id <= 0:
            raise InvalidChainIdError(f"Invalid chain ID: {reference}", reference)

        chain = registry.by_chain_id.get(chain_id)
        if chain is None:
            raise UnknownChainIdError(f"Unknown chain ID: {chain_id}", reference)
        return ResolvedChain(chain_id=chain_id, coin_type=chain.coin_type, chain_info=chain)

    chain = registry.get_by_namespace_reference(namespace, reference)
    if chain is None:
        raise UnknownChainReferenceError(
            f"Unknown chain reference: {reference}",
            f"{namespace}:{reference}",
        )
    return _to_resolved(chain)


def _to_resolved(chain: ChainInfo) -> ResolvedChain:
    chain_id = chain.chain_id if isinstance(chain.chain_id, int) else 0
    return ResolvedChain(chain_id=chain_id, coin_type=chain.coin_type, chain_info=chain)


def get_available_chains(registry: ChainRegistry | None = None) -> list[ChainInfo]:
    """Return every chain in the registry."""
    if registry is None:
        registry = get_default_registry()
    return list(registry.by_chain_id.values())


def get_chain_by_id(chain_id: int | str, registry: ChainRegistry | None = None) -> ChainInfo | None:
    if registry is None:
        registry = get_default_registry()
    return registry.by_chain_id.get(chain_id)


def get_chain_by_short_name(short_name: str, registry: ChainRegistry | None = None) -> ChainInfo | None:
    """Look up a chain by short name, case-insensitively."""
    if registry is None:
        registry = get_default_registry()
    return registry.by_short_name.get(short_name.strip().lower())
