"""Test vectors and JSON-RPC response helpers shared across test modules."""

from __future__ import annotations

import json

import httpx
from eth_abi import encode

from crossname.resolution.ens import ADDR_SELECTOR, RESOLVER_SELECTOR

RPC_URL = "https://rpc.example.test"
RESOLVER_ADDRESS = "0x231b0Ee14048e9dCcD1d247744d114a4EB5E8E63"

# EIP-55 test vector
EVM_ADDRESS_LOWER = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
EVM_ADDRESS_CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

# BIP-173 / BIP-350 test vectors (scriptPubKey hex -> address)
P2WPKH_SCRIPT = "0x0014751e76e8199196d454941c45d1b3a323f1433bd6"
P2WPKH_ADDRESS = "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
P2WSH_SCRIPT = "0x00201863143c14c5166804bd19203356da136c985678cd4d27a1b8c6329604903262"
P2WSH_ADDRESS = "bc1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3qccfmv3"
P2TR_SCRIPT = "0x512079be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
P2TR_ADDRESS = "bc1p0xlxvlhemja6c4dqv22uapctqupfhlxm9h8z3k2e72q4k9hcz7vqzk5jj0"
V16_SCRIPT = "0x6002751e"
V16_ADDRESS = "bc1sw50qgdz25j"

# Solana system program (32 zero bytes)
SOLANA_ZERO_KEY_HEX = "0x" + "00" * 32
SOLANA_ZERO_KEY = "1" * 32


# ============================================================================
# JSON-RPC Response Helpers
# ============================================================================


def rpc_result(request: httpx.Request, result: str) -> httpx.Response:
    body = json.loads(request.content)
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})


def rpc_error(request: httpx.Request, message: str = "execution reverted") -> httpx.Response:
    body = json.loads(request.content)
    return httpx.Response(
        200,
        json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": -32000, "message": message}},
    )


def call_data(request: httpx.Request) -> bytes:
    """Extract the eth_call data bytes from a JSON-RPC request."""
    body = json.loads(request.content)
    return bytes.fromhex(body["params"][0]["data"][2:])


class EnsRpcHandler:
    """
    respx side effect answering ENS registry and resolver calls.

    Every served request body is recorded in `calls`.
    """

    def __init__(
        self,
        resolver_address: str = RESOLVER_ADDRESS,
        raw_address: bytes = b"",
        addr_error: str | None = None,
    ) -> None:
        self.resolver_address = resolver_address
        self.raw_address = raw_address
        self.addr_error = addr_error
        self.calls: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(json.loads(request.content))
        data = call_data(request)
        if data.startswith(RESOLVER_SELECTOR):
            return rpc_result(request, "0x" + encode(["address"], [self.resolver_address]).hex())
        if data.startswith(ADDR_SELECTOR):
            if self.addr_error is not None:
                return rpc_error(request, self.addr_error)
            return rpc_result(request, "0x" + encode(["bytes"], [self.raw_address]).hex())
        return rpc_error(request, "unexpected call")
