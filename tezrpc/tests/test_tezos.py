"""Address and expression hash validation tests."""

import base58  # type: ignore[import-untyped]
import pytest

from tezrpc.tezos import (
    EXPR_HASH_PREFIX,
    Address,
    AddressType,
    ExprHash,
    decode_check,
    encode_check,
)

BOOTSTRAP1 = "tz1KqTpEZ7Yob7QbPE4Hy4Wo8fHG8LhKxZSx"


class TestAddress:
    def test_parse_implicit(self):
        addr = Address.from_string(BOOTSTRAP1)
        assert addr.kind == AddressType.ED25519
        assert not addr.is_contract
        assert len(addr.hash) == 20
        assert str(addr) == BOOTSTRAP1

    @pytest.mark.parametrize("kind", list(AddressType))
    def test_canonical_string_per_kind(self, kind):
        addr = Address(kind, bytes([7]) * 20)
        s = str(addr)
        assert s.startswith(kind.value)
        assert Address.from_string(s) == addr

    def test_contract(self):
        addr = Address(AddressType.CONTRACT, bytes(20))
        assert addr.is_contract
        assert str(addr).startswith("KT1")

    def test_hashable(self):
        a = Address.from_string(BOOTSTRAP1)
        b = Address.from_string(BOOTSTRAP1)
        assert {a, b} == {a}

    def test_bad_checksum(self):
        bad = BOOTSTRAP1[:-1] + ("a" if BOOTSTRAP1[-1] != "a" else "b")
        with pytest.raises(ValueError):
            Address.from_string(bad)

    def test_unknown_prefix(self):
        with pytest.raises(ValueError, match="unknown address type"):
            Address.from_string("xx1KqTpEZ7Yob7QbPE4Hy4Wo8fHG8LhKxZSx")

    def test_wrong_payload_length(self):
        tz1_prefix = bytes([6, 161, 159])
        s = base58.b58encode_check(tz1_prefix + bytes(19)).decode()
        with pytest.raises(ValueError, match="payload length"):
            decode_check(s, tz1_prefix, 20)

    def test_short_payload_rejected_by_from_string(self):
        s = base58.b58encode_check(bytes([6, 161, 159]) + bytes(19)).decode()
        with pytest.raises(ValueError):
            Address.from_string(s)

    def test_wrong_hash_size(self):
        with pytest.raises(ValueError):
            Address(AddressType.ED25519, bytes(32))


class TestExprHash:
    def test_round_trip(self):
        s = encode_check(EXPR_HASH_PREFIX, bytes(range(32)))
        assert s.startswith("expr")
        h = ExprHash.from_string(s)
        assert h.hash == bytes(range(32))
        assert str(h) == s

    def test_rejects_address(self):
        with pytest.raises(ValueError):
            ExprHash.from_string(BOOTSTRAP1)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            ExprHash.from_string("expr0OIl")
