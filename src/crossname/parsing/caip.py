"""CAIP-2 chain specification parsing."""

from __future__ import annotations

from crossname.chains.registry import ChainRegistry, get_default_registry
from crossname.core.exceptions import InvalidCAIP2FormatError
from crossname.core.identifiers import CAIP2ChainId
from crossname.core.types import Namespace


def parse_caip2_chain_id(
    chain_spec: str,
    registry: ChainRegistry | None = None,
    *,
    strict: bool = False,
) -> CAIP2ChainId:
    """
    Convert a chain specification into a CAIP-2 namespace/reference pair.

    Supported forms:
      - "<chainId>" (shorthand for eip155)
      - registered short names carrying a namespace/reference
      - "<namespace>:<reference>"

    Anything else becomes an eip155 reference so that the registry lookup
    downstream reports the unknown chain.

    Args:
        chain_spec: The chain specification string
        registry: Registry to consult for short names
        strict: Raise InvalidCAIP2FormatError for multi-colon specs
            that break the CAIP-2 grammar instead of passing them through

    Example:
        parse_caip2_chain_id("1")       # eip155:1
        parse_caip2_chain_id("solana")  # solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp
    """
    if chain_spec.isdecimal() and chain_spec.isascii():
        return CAIP2ChainId(namespace=Namespace.EIP155.value, reference=chain_spec)

    if registry is None:
        registry = get_default_registry()
    chain = registry.by_short_name.get(chain_spec.lower())
    if chain is not None and chain.namespace and chain.reference:
        return CAIP2ChainId(namespace=chain.namespace, reference=chain.reference)

    if ":" in chain_spec:
        if CAIP2ChainId.is_valid(chain_spec):
            return CAIP2ChainId.parse(chain_spec)
        if strict and chain_spec.count(":") > 1:
            raise InvalidCAIP2FormatError(
                f"Invalid CAIP-2 format: {chain_spec}",
                details={"chain_spec": chain_spec},
            )

    return CAIP2ChainId(namespace=Namespace.EIP155.value, reference=chain_spec)
