"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENS_REGISTRY_ADDRESS = "0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"


class CrossnameSettings(BaseSettings):
    """Library configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CROSSNAME_",
    )

    # Ethereum mainnet JSON-RPC (ENS lives on L1)
    rpc_url: str = Field(
        default="https://eth.llamarpc.com",
        description="Ethereum mainnet JSON-RPC endpoint",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="JSON-RPC request timeout in seconds",
    )
    ens_registry_address: str = Field(
        default=ENS_REGISTRY_ADDRESS,
        description="ENS registry contract address",
    )

    # Chain registry
    chains_file: Path | None = Field(
        default=None,
        description="Chain dataset to use instead of the packaged one",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> CrossnameSettings:
    """Get cached settings instance."""
    return CrossnameSettings()
