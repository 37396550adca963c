"""Crossname - EIP-7828 cross-chain ENS name resolution library."""

from crossname.chains.display_names import (
    DISPLAY_NAME_MAPPINGS,
    get_available_display_names,
    get_display_name_mapping,
    resolve_display_name,
)
from crossname.chains.registry import ChainRegistry, get_default_registry, load_registry
from crossname.chains.resolver import (
    get_available_chains,
    get_chain_by_id,
    get_chain_by_short_name,
    resolve_chain,
)
from crossname.client import CrossnameClient, resolve_7828, validate_7828_name
from crossname.core.models import ChainInfo, Parsed7828Name, ResolvedAddress, ResolvedChain
from crossname.parsing.caip import parse_caip2_chain_id
from crossname.parsing.name import format_7828_name, parse_7828_name, validate_ens_name

__version__ = "0.1.0"
__all__ = [
    # Client
    "CrossnameClient",
    "resolve_7828",
    "validate_7828_name",
    # Parsing
    "format_7828_name",
    "parse_7828_name",
    "parse_caip2_chain_id",
    "validate_ens_name",
    # Chains
    "ChainRegistry",
    "get_default_registry",
    "load_registry",
    "get_available_chains",
    "get_chain_by_id",
    "get_chain_by_short_name",
    "resolve_chain",
    # Display names
    "DISPLAY_NAME_MAPPINGS",
    "get_available_display_names",
    "get_display_name_mapping",
    "resolve_display_name",
    # Models
    "ChainInfo",
    "Parsed7828Name",
    "ResolvedAddress",
    "ResolvedChain",
    # Version
    "__version__",
]
