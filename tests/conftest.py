"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from crossname.chains.registry import ChainRegistry, get_default_registry
from crossname.config import CrossnameSettings
from crossname.core.models import ChainInfo
from tests.helpers import RPC_URL

# ============================================================================
# Chain Fixtures
# ============================================================================


@pytest.fixture
def registry() -> ChainRegistry:
    """The registry built from the packaged dataset."""
    return get_default_registry()


@pytest.fixture
def ethereum_chain() -> ChainInfo:
    return ChainInfo(
        chain_id=1,
        short_name="eth",
        name="Ethereum Mainnet",
        coin_type=60,
        namespace="eip155",
        reference="1",
    )


@pytest.fixture
def base_chain() -> ChainInfo:
    return ChainInfo(
        chain_id=8453,
        short_name="base",
        name="Base",
        coin_type=2147492101,
        namespace="eip155",
        reference="8453",
    )


@pytest.fixture
def bitcoin_chain() -> ChainInfo:
    return ChainInfo(
        chain_id="bitcoin",
        short_name="bitcoin",
        name="Bitcoin",
        coin_type=0,
        namespace="bip122",
        reference="000000000019d6689c085ae165831e93",
    )


@pytest.fixture
def solana_chain() -> ChainInfo:
    return ChainInfo(
        chain_id="solana",
        short_name="solana",
        name="Solana",
        coin_type=501,
        namespace="solana",
        reference="5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp",
    )


@pytest.fixture
def small_registry(
    base_chain: ChainInfo,
    bitcoin_chain: ChainInfo,
    solana_chain: ChainInfo,
) -> ChainRegistry:
    """A registry without Ethereum mainnet, for alias fallback tests."""
    return ChainRegistry([base_chain, bitcoin_chain, solana_chain])


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> CrossnameSettings:
    """Create settings pointing at a mocked RPC endpoint."""
    return CrossnameSettings(
        rpc_url=RPC_URL,
        request_timeout=5.0,
        log_level="DEBUG",
    )
