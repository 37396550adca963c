"""EIP-7828 name parsing and formatting."""

from __future__ import annotations

import re

from ens.exceptions import InvalidName
from ens.utils import normalize_name

from crossname.core.exceptions import ChecksumFormatError, InvalidENSNameError, NameFormatError
from crossname.core.models import Parsed7828Name, ResolvedAddress

ENS_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9.-]+$")
CHECKSUM_PATTERN = re.compile(r"^[0-9a-fA-F]{8}$")


def parse_7828_name(text: str) -> Parsed7828Name:
    """
    Parse an EIP-7828 name of the form `<ensName>@<chainSpec>[#<checksum>]`.

    The checksum is format-checked only.

    Example:
        parse_7828_name("alice.eth@base#abcd1234")
        # Parsed7828Name(ens_name="alice.eth", chain_spec="base", checksum="abcd1234")

    Raises:
        NameFormatError: Missing or repeated @, or an empty chain spec
        InvalidENSNameError: ENS part fails validation or normalization
        ChecksumFormatError: Checksum is not 8 hex characters
    """
    if not text or not isinstance(text, str):
        raise NameFormatError("Input must be a non-empty string")

    parts = text.split("@")
    if len(parts) != 2:
        raise NameFormatError(
            "Invalid format: must contain exactly one @ symbol",
            details={"input": text},
        )
    ens_name, chain_part = parts

    if not validate_ens_name(ens_name):
        raise InvalidENSNameError("Invalid ENS name format", details={"ens_name": ens_name})

    chain_spec, _, checksum = chain_part.partition("#")
    if "#" in chain_part and not CHECKSUM_PATTERN.match(checksum):
        raise ChecksumFormatError(
            "Checksum must be exactly 8 hexadecimal characters",
            details={"checksum": checksum},
        )

    chain_spec = chain_spec.strip()
    if not chain_spec:
        raise NameFormatError("Chain specification cannot be empty", details={"input": text})

    try:
        normalized = normalize_name(ens_name)
    except InvalidName as e:
        raise InvalidENSNameError(
            f"Invalid ENS name: {e}", details={"ens_name": ens_name}
        ) from e

    return Parsed7828Name(
        ens_name=normalized,
        chain_spec=chain_spec,
        checksum=checksum if "#" in chain_part else None,
    )


def validate_ens_name(name: str) -> bool:
    """Basic ENS name check: at least one dot, letters/digits/dots/hyphens only."""
    if not name or not isinstance(name, str):
        return False
    return "." in name and bool(ENS_NAME_PATTERN.match(name))


def format_7828_name(address: ResolvedAddress) -> str:
    """Format a resolved address as `<address>@<chainName>`."""
    return f"{address.address}@{address.chain_name}"
