"""Base58check encoded Tezos identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import base58  # type: ignore[import-untyped]

ADDRESS_HASH_SIZE = 20
EXPR_HASH_SIZE = 32


class AddressType(Enum):
    ED25519 = "tz1"
    SECP256K1 = "tz2"
    P256 = "tz3"
    BLS12_381 = "tz4"
    CONTRACT = "KT1"
    TX_ROLLUP = "txr1"
    SMART_ROLLUP = "sr1"

    def __str__(self) -> str:
        return self.value


_ADDRESS_PREFIXES: dict[AddressType, bytes] = {
    AddressType.ED25519: bytes([6, 161, 159]),
    AddressType.SECP256K1: bytes([6, 161, 161]),
    AddressType.P256: bytes([6, 161, 164]),
    AddressType.BLS12_381: bytes([6, 161, 166]),
    AddressType.CONTRACT: bytes([2, 90, 121]),
    AddressType.TX_ROLLUP: bytes([1, 128, 120, 31]),
    AddressType.SMART_ROLLUP: bytes([6, 124, 117]),
}

EXPR_HASH_PREFIX = bytes([13, 44, 64, 27])


def decode_check(s: str, prefix: bytes, size: int) -> bytes:
    """Decode a base58check string and strip its version prefix.

    Raises ValueError when the checksum, prefix or payload length is wrong.
    """
    try:
        raw = base58.b58decode_check(s)
    except ValueError as e:
        raise ValueError(f"invalid base58check string {s!r}: {e}") from e
    if not raw.startswith(prefix):
        raise ValueError(f"unexpected prefix in {s!r}")
    payload = raw[len(prefix) :]
    if len(payload) != size:
        raise ValueError(
            f"invalid payload length in {s!r}: {len(payload)} bytes, want {size}"
        )
    return payload


def encode_check(prefix: bytes, payload: bytes) -> str:
    return base58.b58encode_check(prefix + payload).decode("ascii")


@dataclass(frozen=True)
class Address:
    """A validated implicit, originated or rollup account address."""

    kind: AddressType
    hash: bytes

    def __post_init__(self) -> None:
        if len(self.hash) != ADDRESS_HASH_SIZE:
            raise ValueError(
                f"address hash must be {ADDRESS_HASH_SIZE} bytes, got {len(self.hash)}"
            )

    @classmethod
    def from_string(cls, s: str) -> Address:
        for kind, prefix in _ADDRESS_PREFIXES.items():
            if not s.startswith(kind.value):
                continue
            return cls(kind, decode_check(s, prefix, ADDRESS_HASH_SIZE))
        raise ValueError(f"unknown address type: {s!r}")

    @property
    def is_contract(self) -> bool:
        return self.kind == AddressType.CONTRACT

    def __str__(self) -> str:
        return encode_check(_ADDRESS_PREFIXES[self.kind], self.hash)


@dataclass(frozen=True)
class ExprHash:
    """Script expression hash identifying a packed bigmap key."""

    hash: bytes

    def __post_init__(self) -> None:
        if len(self.hash) != EXPR_HASH_SIZE:
            raise ValueError(
                f"expression hash must be {EXPR_HASH_SIZE} bytes, got {len(self.hash)}"
            )

    @classmethod
    def from_string(cls, s: str) -> ExprHash:
        return cls(decode_check(s, EXPR_HASH_PREFIX, EXPR_HASH_SIZE))

    def __str__(self) -> str:
        return encode_check(EXPR_HASH_PREFIX, self.hash)
