"""CAIP identifier value objects with validation."""

from __future__ import annotations

import re
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CAIP2ChainId(BaseModel):
    """CAIP-2 blockchain identifier, `namespace:reference`."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Chain namespace (e.g., eip155, bip122)")
    reference: str = Field(..., description="Reference within the namespace")

    NAMESPACE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[-a-z0-9]{3,8}$")
    REFERENCE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[-_a-zA-Z0-9]{1,32}$")
    CHAIN_ID_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^([-a-z0-9]{3,8}):([-_a-zA-Z0-9]{1,32})$"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check whether a string is a well-formed CAIP-2 chain ID."""
        return bool(cls.CHAIN_ID_PATTERN.match(value))

    @classmethod
    def parse(cls, value: str) -> CAIP2ChainId:
        """Parse a `namespace:reference` string."""
        match = cls.CHAIN_ID_PATTERN.match(value.strip())
        if not match:
            raise ValueError(f"Invalid CAIP-2 chain ID: {value}")
        return cls(namespace=match.group(1), reference=match.group(2))

    def __str__(self) -> str:
        return f"{self.namespace}:{self.reference}"


class CAIP10AccountId(BaseModel):
    """CAIP-10 account identifier, `namespace:reference:address`."""

    model_config = ConfigDict(frozen=True)

    chain_id: CAIP2ChainId
    address: str = Field(..., min_length=1, description="Account address in native format")

    ADDRESS_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[-.%a-zA-Z0-9]{1,128}$")

    @model_validator(mode="after")
    def validate_address(self) -> Self:
        if not self.ADDRESS_PATTERN.match(self.address):
            raise ValueError(f"Invalid CAIP-10 account address: {self.address}")
        return self

    @classmethod
    def parse(cls, value: str) -> CAIP10AccountId:
        """Parse a `namespace:reference:address` string."""
        namespace, sep, rest = value.strip().partition(":")
        reference, sep2, address = rest.partition(":")
        if not sep or not sep2:
            raise ValueError(f"Invalid CAIP-10 account ID: {value}")
        return cls(chain_id=CAIP2ChainId.parse(f"{namespace}:{reference}"), address=address)

    def __str__(self) -> str:
        return f"{self.chain_id}:{self.address}"
