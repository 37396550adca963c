"""Custom exception hierarchy for crossname."""

from typing import Any


class CrossnameError(Exception):
    """Base exception for all crossname errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CrossnameError):
    """Input validation failed."""

    pass


class NameFormatError(ValidationError):
    """EIP-7828 name does not follow the `<ensName>@<chainSpec>[#<checksum>]` grammar."""

    pass


class InvalidENSNameError(NameFormatError):
    """ENS part of the name is malformed."""

    pass


class ChecksumFormatError(NameFormatError):
    """Trailing checksum is not 8 hexadecimal characters."""

    pass


class ChainSpecError(ValidationError):
    """Chain specification is empty or could not be resolved."""

    pass


class InvalidCAIP2FormatError(ValidationError):
    """Chain specification looks like CAIP-2 but breaks its grammar."""

    pass


class ChainLookupError(CrossnameError):
    """Chain specification did not match the registry."""

    def __init__(
        self,
        message: str,
        chain_spec: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, {"chain_spec": chain_spec, **(details or {})})
        self.chain_spec = chain_spec


class InvalidChainIdError(ChainLookupError):
    """eip155 reference is not a positive integer."""

    pass


class UnknownChainIdError(ChainLookupError):
    """Numeric chain ID is not in the registry."""

    pass


class UnknownChainReferenceError(ChainLookupError):
    """Non-EVM namespace/reference pair is not in the registry."""

    pass


class UnknownChainSpecError(ChainLookupError):
    """Every lookup strategy failed for the chain specification."""

    pass


class AddressEncodingError(CrossnameError):
    """Raw address payload could not be rendered for the chain."""

    def __init__(
        self,
        message: str,
        encoding: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.encoding = encoding


class InvalidAddressError(AddressEncodingError):
    """Raw address has the wrong prefix, length or alphabet."""

    pass


class UnsupportedWitnessVersionError(AddressEncodingError):
    """scriptPubKey does not start with a segwit version opcode."""

    def __init__(
        self,
        message: str,
        version_byte: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, "bitcoin", details)
        self.version_byte = version_byte


class ResolutionError(CrossnameError):
    """Failed to resolve a name to an address."""

    pass


class NoResolverError(ResolutionError):
    """ENS registry has no resolver for the name."""

    pass


class NoAddressError(ResolutionError):
    """Resolver has no address for the name on the requested chain."""

    pass


class RpcError(ResolutionError):
    """JSON-RPC endpoint is unavailable or returned an error."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class RegistryError(CrossnameError):
    """Chain registry data is malformed or inconsistent."""

    pass
