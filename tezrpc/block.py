"""Block references used to pin queries to a point in chain history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from tezrpc.tezos import decode_check, encode_check

BLOCK_HASH_PREFIX = bytes([1, 52])
BLOCK_HASH_SIZE = 32


class BlockID(Protocol):
    def __str__(self) -> str: ...


@dataclass(frozen=True)
class BlockAlias:
    name: str

    def __str__(self) -> str:
        return self.name


HEAD = BlockAlias("head")
GENESIS = BlockAlias("genesis")


@dataclass(frozen=True)
class BlockLevel:
    level: int

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError(f"block level must be non-negative, got {self.level}")

    def __str__(self) -> str:
        return str(self.level)


@dataclass(frozen=True)
class BlockHash:
    hash: bytes

    def __post_init__(self) -> None:
        if len(self.hash) != BLOCK_HASH_SIZE:
            raise ValueError(
                f"block hash must be {BLOCK_HASH_SIZE} bytes, got {len(self.hash)}"
            )

    @classmethod
    def from_string(cls, s: str) -> BlockHash:
        return cls(decode_check(s, BLOCK_HASH_PREFIX, BLOCK_HASH_SIZE))

    def __str__(self) -> str:
        return encode_check(BLOCK_HASH_PREFIX, self.hash)


AnyBlockID = Union[BlockAlias, BlockLevel, BlockHash]


def parse_block_id(s: str) -> AnyBlockID:
    """Parse "head", "genesis", a decimal level or a block hash."""
    if s in (HEAD.name, GENESIS.name):
        return BlockAlias(s)
    if s.isdigit():
        return BlockLevel(int(s))
    return BlockHash.from_string(s)
