"""Core types, models, and exceptions."""

from .exceptions import (
    AddressEncodingError,
    ChainLookupError,
    ChainSpecError,
    ChecksumFormatError,
    CrossnameError,
    InvalidAddressError,
    InvalidCAIP2FormatError,
    InvalidChainIdError,
    InvalidENSNameError,
    NameFormatError,
    NoAddressError,
    NoResolverError,
    RegistryError,
    ResolutionError,
    RpcError,
    UnknownChainIdError,
    UnknownChainReferenceError,
    UnknownChainSpecError,
    UnsupportedWitnessVersionError,
    ValidationError,
)
from .identifiers import CAIP2ChainId, CAIP10AccountId
from .models import ChainInfo, Parsed7828Name, ResolvedAddress, ResolvedChain
from .types import AddressEncoding, Namespace

__all__ = [
    # Types
    "AddressEncoding",
    "Namespace",
    # Identifiers
    "CAIP2ChainId",
    "CAIP10AccountId",
    # Models
    "ChainInfo",
    "Parsed7828Name",
    "ResolvedAddress",
    "ResolvedChain",
    # Exceptions
    "AddressEncodingError",
    "ChainLookupError",
    "ChainSpecError",
    "ChecksumFormatError",
    "CrossnameError",
    "InvalidAddressError",
    "InvalidCAIP2FormatError",
    "InvalidChainIdError",
    "InvalidENSNameError",
    "NameFormatError",
    "NoAddressError",
    "NoResolverError",
    "RegistryError",
    "ResolutionError",
    "RpcError",
    "UnknownChainIdError",
    "UnknownChainReferenceError",
    "UnknownChainSpecError",
    "UnsupportedWitnessVersionError",
    "ValidationError",
]
