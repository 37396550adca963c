"""Domain models for chains, parsed names and resolved addresses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChainInfo(BaseModel):
    """A single chain registry entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chain_id: int | str = Field(
        ..., alias="chainId", description="Numeric EVM chain ID, or a name for manual chains"
    )
    short_name: str = Field(..., alias="shortName", min_length=1, description="Canonical short name")
    name: str = Field(..., description="Human readable chain name")
    coin_type: int = Field(..., alias="coinType", ge=0, description="SLIP-44 / ENSIP-11 coin type")
    namespace: str | None = Field(default=None, description="CAIP-2 namespace")
    reference: str | None = Field(default=None, description="CAIP-2 reference")

    @field_validator("short_name", mode="before")
    @classmethod
    def normalize_short_name(cls, v: str) -> str:
        return str(v).strip().lower()

    @property
    def is_evm(self) -> bool:
        """Whether this entry is keyed by a numeric EVM chain ID."""
        return isinstance(self.chain_id, int)

    @property
    def caip2(self) -> str | None:
        """Return `namespace:reference`, if both are known."""
        if self.namespace and self.reference:
            return f"{self.namespace}:{self.reference}"
        return None


class Parsed7828Name(BaseModel):
    """Fields of an `<ensName>@<chainSpec>[#<checksum>]` name."""

    model_config = ConfigDict(frozen=True)

    ens_name: str = Field(..., description="ENS-normalized name")
    chain_spec: str = Field(..., description="Trimmed chain specification")
    checksum: str | None = Field(default=None, description="Optional 8 hex character checksum")


class ResolvedChain(BaseModel):
    """Chain specification resolved against the registry."""

    model_config = ConfigDict(frozen=True)

    chain_id: int = Field(..., description="Numeric chain ID (0 for non-numeric manual chains)")
    coin_type: int = Field(..., description="Coin type used for ENS address lookups")
    chain_info: ChainInfo


class ResolvedAddress(BaseModel):
    """Final result of resolving an EIP-7828 name."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Address in the chain's native format")
    chain_id: int | str = Field(..., description="Registry chain ID")
    chain_name: str = Field(..., description="Human readable chain name")
    caip10: str = Field(..., description="CAIP-10 account identifier")
    coin_type: int
