"""Network layer for ENS lookups."""

from crossname.resolution.base import JsonRpcClient, RpcConfig
from crossname.resolution.ens import EnsResolver

__all__ = ["EnsResolver", "JsonRpcClient", "RpcConfig"]
