"""EIP-7828 name and CAIP-2 chain specification parsing."""

from .caip import parse_caip2_chain_id
from .name import format_7828_name, parse_7828_name, validate_ens_name

__all__ = ["format_7828_name", "parse_7828_name", "parse_caip2_chain_id", "validate_ens_name"]
