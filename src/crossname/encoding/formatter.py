"""Namespace-aware address formatting and CAIP-10 assembly."""

from __future__ import annotations

from types import MappingProxyType

from crossname.core.exceptions import RegistryError
from crossname.core.identifiers import CAIP2ChainId, CAIP10AccountId
from crossname.core.models import ChainInfo
from crossname.core.types import AddressEncoding, Namespace
from crossname.encoding.base import AddressCodec
from crossname.encoding.bitcoin import BitcoinAddressCodec
from crossname.encoding.evm import EvmAddressCodec
from crossname.encoding.solana import SolanaAddressCodec

BITCOIN_COIN_TYPE = 0

CODECS: MappingProxyType[AddressEncoding, AddressCodec] = MappingProxyType(
    {
        AddressEncoding.EVM: EvmAddressCodec(),
        AddressEncoding.BITCOIN: BitcoinAddressCodec(),
        AddressEncoding.SOLANA: SolanaAddressCodec(),
    }
)


def encoding_for_chain(chain_info: ChainInfo) -> AddressEncoding:
    """Pick the native address format for a registry entry."""
    if chain_info.coin_type == BITCOIN_COIN_TYPE:
        return AddressEncoding.BITCOIN
    if chain_info.namespace == Namespace.SOLANA:
        return AddressEncoding.SOLANA
    return AddressEncoding.EVM


def codec_for_chain(chain_info: ChainInfo) -> AddressCodec:
    return CODECS[encoding_for_chain(chain_info)]


def format_address(raw_address: str, chain_info: ChainInfo) -> str:
    """Render a raw resolver payload in the chain's native format."""
    return codec_for_chain(chain_info).encode(raw_address)


def build_caip10(chain_info: ChainInfo, address: str) -> str:
    """Build `namespace:reference:address` from the registry entry."""
    if not chain_info.namespace or not chain_info.reference:
        raise RegistryError(
            f"Chain {chain_info.short_name} has no CAIP-2 namespace/reference",
            details={"short_name": chain_info.short_name},
        )
    chain_id = CAIP2ChainId(namespace=chain_info.namespace, reference=chain_info.reference)
    return str(CAIP10AccountId(chain_id=chain_id, address=address))
