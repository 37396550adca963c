"""ENS registry and resolver contract calls."""

from __future__ import annotations

import logging

from ens import ENS
from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector, to_checksum_address

from crossname.config import ENS_REGISTRY_ADDRESS
from crossname.core.exceptions import RpcError
from crossname.resolution.base import JsonRpcClient

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x" + "0" * 40

# ENS registry: resolver(bytes32 node) returns (address)
RESOLVER_SELECTOR = function_signature_to_4byte_selector("resolver(bytes32)")
# ENSIP-9 multicoin resolver: addr(bytes32 node, uint256 coinType) returns (bytes)
ADDR_SELECTOR = function_signature_to_4byte_selector("addr(bytes32,uint256)")


class EnsResolver:
    """Reads resolver and multicoin address records from ENS."""

    def __init__(self, rpc: JsonRpcClient, registry_address: str = ENS_REGISTRY_ADDRESS) -> None:
        self._rpc = rpc
        self.registry_address = to_checksum_address(registry_address)

    @staticmethod
    def namehash(name: str) -> bytes:
        """EIP-137 namehash of a normalized ENS name."""
        return bytes(ENS.namehash(name))

    async def get_resolver(self, node: bytes) -> str:
        """Return the resolver address for a node, or the zero address if unset."""
        result = await self._rpc.eth_call(
            self.registry_address,
            RESOLVER_SELECTOR + encode(["bytes32"], [node]),
        )
        if not result:
            return ZERO_ADDRESS
        (address,) = self._decode(["address"], result)
        return to_checksum_address(address)

    async def get_address(self, resolver_address: str, node: bytes, coin_type: int) -> bytes:
        """Return the raw address bytes stored for a coin type (empty if unset)."""
        logger.debug("addr(%s, %d) on resolver %s", node.hex(), coin_type, resolver_address)
        result = await self._rpc.eth_call(
            resolver_address,
            ADDR_SELECTOR + encode(["bytes32", "uint256"], [node, coin_type]),
        )
        if not result:
            return b""
        (raw,) = self._decode(["bytes"], result)
        return raw

    def _decode(self, types: list[str], data: bytes) -> tuple:
        try:
            return decode(types, data)
        except DecodingError as e:
            raise RpcError(
                message=f"Could not decode contract response as {types}: {e}",
                url=self._rpc.url,
            ) from e
