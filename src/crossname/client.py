"""Main library client for resolving EIP-7828 names."""

from __future__ import annotations

import logging
from typing import Any

from crossname.chains.registry import ChainRegistry, get_default_registry, load_registry
from crossname.chains.resolver import resolve_chain
from crossname.config import CrossnameSettings, get_settings
from crossname.core.exceptions import (
    ChainSpecError,
    CrossnameError,
    NoAddressError,
    NoResolverError,
    ResolutionError,
)
from crossname.core.models import ResolvedAddress, ResolvedChain
from crossname.encoding.formatter import build_caip10, format_address
from crossname.parsing.name import parse_7828_name
from crossname.resolution.base import JsonRpcClient, RpcConfig
from crossname.resolution.ens import ZERO_ADDRESS, EnsResolver

logger = logging.getLogger(__name__)


class CrossnameClient:
    """
    Resolves EIP-7828 names (`alice.eth@base`) to chain-native addresses.

    Usage:
        async with CrossnameClient() as client:
            result = await client.resolve("alice.eth@base")
            result.address  # "0x..."
            result.caip10   # "eip155:8453:0x..."

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: CrossnameSettings | None = None,
        *,
        rpc_client: JsonRpcClient | None = None,
        registry: ChainRegistry | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Library settings. If not provided, the cached environment settings are used.
            rpc_client: JSON-RPC client to use instead of one built from settings.
            registry: Chain registry to use instead of the configured dataset.
        """
        self._settings = settings or get_settings()
        self._rpc = rpc_client
        self._owns_rpc = rpc_client is None
        self._registry = registry
        self._ens: EnsResolver | None = None

    async def __aenter__(self) -> CrossnameClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _initialize(self) -> None:
        logging.getLogger("crossname").setLevel(self._settings.log_level.upper())

        if self._registry is None:
            if self._settings.chains_file:
                self._registry = load_registry(self._settings.chains_file)
            else:
                self._registry = get_default_registry()

        if self._rpc is None:
            self._rpc = JsonRpcClient(
                RpcConfig(url=self._settings.rpc_url, timeout=self._settings.request_timeout)
            )
            self._owns_rpc = True

        self._ens = EnsResolver(self._rpc, self._settings.ens_registry_address)
        logger.info("Crossname client initialized (rpc=%s, chains=%d)", self._rpc.url, len(self._registry))

    async def close(self) -> None:
        """Close the RPC client if this instance created it."""
        if self._rpc is not None and self._owns_rpc:
            await self._rpc.close()
            self._rpc = None
        self._ens = None

    def _ensure_initialized(self) -> None:
        if self._ens is None or self._registry is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with CrossnameClient() as client:'"
            )

    @property
    def registry(self) -> ChainRegistry:
        if self._registry is None:
            return get_default_registry()
        return self._registry

    def resolve_chain(self, chain_spec: str) -> ResolvedChain:
        """Resolve a chain specification against this client's registry."""
        return resolve_chain(chain_spec, self.registry)

    async def resolve(self, name: str) -> ResolvedAddress:
        """
        Resolve an EIP-7828 name to an address on the named chain.

        The ENS resolver lookup completes before the address lookup is sent,
        since the second call targets the resolver returned by the first.

        Raises:
            NameFormatError: Malformed name
            ChainSpecError: Chain specification could not be resolved
            NoResolverError: Name has no resolver
            NoAddressError: Resolver has no address for the chain's coin type
            ResolutionError: A contract call failed
        """
        self._ensure_initialized()

        parsed = parse_7828_name(name)

        try:
            resolved_chain = resolve_chain(parsed.chain_spec, self._registry)
        except CrossnameError as e:
            raise ChainSpecError(
                f"Invalid chain specification: {parsed.chain_spec} - {e.message}",
                details={"chain_spec": parsed.chain_spec, **e.details},
            ) from e

        chain_info = resolved_chain.chain_info
        context: dict[str, Any] = {
            "ens_name": parsed.ens_name,
            "chain_name": chain_info.name,
            "coin_type": resolved_chain.coin_type,
        }
        where = (
            f"{parsed.ens_name} on chain {chain_info.name} "
            f"(coin type: {resolved_chain.coin_type})"
        )

        node = self._ens.namehash(parsed.ens_name)

        try:
            resolver_address = await self._ens.get_resolver(node)
        except Exception as e:
            raise ResolutionError(f"Failed to look up resolver for {where}: {e}", details=context) from e

        if not resolver_address or resolver_address == ZERO_ADDRESS:
            raise NoResolverError(f"No resolver found for {parsed.ens_name}", details=context)

        try:
            raw_address = await self._ens.get_address(
                resolver_address, node, resolved_chain.coin_type
            )
        except Exception as e:
            raise ResolutionError(f"Failed to resolve address for {where}: {e}", details=context) from e

        if not raw_address or raw_address == bytes(20):
            raise NoAddressError(f"No address found for {where}", details=context)

        address = format_address("0x" + raw_address.hex(), chain_info)
        logger.debug("Resolved %s to %s", name, address)

        return ResolvedAddress(
            address=address,
            chain_id=chain_info.chain_id,
            chain_name=chain_info.name,
            caip10=build_caip10(chain_info, address),
            coin_type=resolved_chain.coin_type,
        )

    def validate(self, name: str) -> bool:
        """Check a name's format and chain without touching the network."""
        return validate_7828_name(name, self.registry)


def validate_7828_name(name: str, registry: ChainRegistry | None = None) -> bool:
    """
    Validate an EIP-7828 name without resolving it.

    Example:
        validate_7828_name("alice.eth@base")  # True
        validate_7828_name("invalid@1")       # False
    """
    try:
        parsed = parse_7828_name(name)
        resolve_chain(parsed.chain_spec, registry)
    except CrossnameError:
        return False
    return True


# Convenience function for one-off resolutions
async def resolve_7828(
    name: str,
    *,
    rpc_url: str | None = None,
    settings: CrossnameSettings | None = None,
) -> ResolvedAddress:
    """
    Resolve an EIP-7828 name (convenience function).

    For multiple resolutions, use CrossnameClient to reuse the connection.
    """
    settings = settings or get_settings()
    if rpc_url:
        settings = settings.model_copy(update={"rpc_url": rpc_url})
    async with CrossnameClient(settings) as client:
        return await client.resolve(name)
