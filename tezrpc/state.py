"""Typed records decoded from contract and bigmap RPC responses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from tezrpc.micheline import Prim
from tezrpc.tezos import Address

Contracts = list[Address]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_int64(s: Any) -> int:
    """Parse a quoted signed 64-bit decimal as the node sends it.

    Only ASCII digits with an optional sign are accepted; whitespace,
    underscores and out-of-range values raise ValueError.
    """
    if not isinstance(s, str):
        raise ValueError(f"expected quoted integer, got {s!r}")
    if not _DECIMAL.fullmatch(s):
        raise ValueError(f"invalid integer {s!r}")
    v = int(s, 10)
    if not INT64_MIN <= v <= INT64_MAX:
        raise ValueError(f"integer {s!r} out of int64 range")
    return v


@dataclass
class BigmapInfo:
    key_type: Prim
    value_type: Prim
    total_bytes: int  # quoted decimal on the wire

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BigmapInfo:
        return cls(
            key_type=Prim.from_json(data["key_type"]),
            value_type=Prim.from_json(data["value_type"]),
            total_bytes=parse_int64(data["total_bytes"]),
        )
