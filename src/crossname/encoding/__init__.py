"""Chain-native address codecs."""

from crossname.encoding.base import AddressCodec
from crossname.encoding.bitcoin import BitcoinAddressCodec
from crossname.encoding.evm import EvmAddressCodec
from crossname.encoding.formatter import (
    CODECS,
    build_caip10,
    codec_for_chain,
    encoding_for_chain,
    format_address,
)
from crossname.encoding.solana import SolanaAddressCodec

__all__ = [
    # Codecs
    "AddressCodec",
    "BitcoinAddressCodec",
    "EvmAddressCodec",
    "SolanaAddressCodec",
    # Dispatch
    "CODECS",
    "build_caip10",
    "codec_for_chain",
    "encoding_for_chain",
    "format_address",
]
