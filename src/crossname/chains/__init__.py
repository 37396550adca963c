"""Chain registry and display-name lookups."""

from crossname.chains.display_names import (
    DISPLAY_NAME_MAPPINGS,
    get_available_display_names,
    get_display_name_mapping,
    resolve_display_name,
)
from crossname.chains.registry import (
    ChainRegistry,
    evm_coin_type,
    get_default_registry,
    load_registry,
)

__all__ = [
    # Registry
    "ChainRegistry",
    "evm_coin_type",
    "get_default_registry",
    "load_registry",
    # Display names
    "DISPLAY_NAME_MAPPINGS",
    "get_available_display_names",
    "get_display_name_mapping",
    "resolve_display_name",
]
