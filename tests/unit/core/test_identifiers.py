"""Tests for CAIP identifier value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crossname.core.identifiers import CAIP2ChainId, CAIP10AccountId

# ============================================================================
# CAIP-2 Tests
# ============================================================================


class TestCAIP2ChainId:
    """Tests for CAIP2ChainId."""

    @pytest.mark.parametrize(
        "value,namespace,reference",
        [
            ("eip155:1", "eip155", "1"),
            ("eip155:8453", "eip155", "8453"),
            ("bip122:000000000019d6689c085ae165831e93", "bip122", "000000000019d6689c085ae165831e93"),
            ("solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp", "solana", "5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"),
        ],
    )
    def test_parse_valid(self, value: str, namespace: str, reference: str):
        """Well-formed CAIP-2 strings should split into namespace and reference."""
        chain_id = CAIP2ChainId.parse(value)
        assert chain_id.namespace == namespace
        assert chain_id.reference == reference
        assert str(chain_id) == value

    @pytest.mark.parametrize(
        "value",
        [
            "eip155",  # No reference
            "a:b:c",  # Too many parts
            "ab:1",  # Namespace too short
            "EIP155:1",  # Uppercase namespace
            "eip155:",  # Empty reference
            "eip155:" + "1" * 33,  # Reference too long
        ],
    )
    def test_parse_invalid(self, value: str):
        """Malformed strings should be rejected."""
        assert CAIP2ChainId.is_valid(value) is False
        with pytest.raises(ValueError, match="Invalid CAIP-2"):
            CAIP2ChainId.parse(value)

    def test_frozen(self):
        """Chain IDs should be immutable."""
        chain_id = CAIP2ChainId(namespace="eip155", reference="1")
        with pytest.raises(ValidationError):
            chain_id.reference = "2"


# ============================================================================
# CAIP-10 Tests
# ============================================================================


class TestCAIP10AccountId:
    """Tests for CAIP10AccountId."""

    def test_str(self):
        """Account IDs should render as namespace:reference:address."""
        account = CAIP10AccountId(
            chain_id=CAIP2ChainId(namespace="eip155", reference="8453"),
            address="0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
        )
        assert str(account) == "eip155:8453:0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    def test_parse(self):
        """Account IDs should parse back into their parts."""
        account = CAIP10AccountId.parse(
            "bip122:000000000019d6689c085ae165831e93:bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
        )
        assert account.chain_id.namespace == "bip122"
        assert account.address == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"

    @pytest.mark.parametrize("value", ["eip155:1", "eip155", "eip155:1:"])
    def test_parse_invalid(self, value: str):
        """Strings without three parts or with an empty address should be rejected."""
        with pytest.raises(ValueError):
            CAIP10AccountId.parse(value)

    def test_invalid_address_characters(self):
        """Addresses outside the CAIP-10 alphabet should be rejected."""
        with pytest.raises(ValidationError):
            CAIP10AccountId(
                chain_id=CAIP2ChainId(namespace="eip155", reference="1"),
                address="not an address",
            )
