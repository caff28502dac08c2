"""Micheline expression trees as returned by the node's JSON RPC.

Only the JSON form is handled here; binary packing is out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PrimType(Enum):
    INVALID = "invalid"
    INT = "int"
    STRING = "string"
    BYTES = "bytes"
    SEQ = "seq"
    PRIM = "prim"


@dataclass(frozen=True)
class Prim:
    """A single Micheline node.

    Exactly one of the payload fields is meaningful, selected by ``type``:
    ``int_value`` for INT, ``str_value`` for STRING, ``bytes_value``
    for BYTES, ``args`` for SEQ, and ``op``/``args``/``annots`` for PRIM.
    """

    type: PrimType = PrimType.INVALID
    op: str = ""
    int_value: int = 0
    str_value: str = ""
    bytes_value: bytes = b""
    args: tuple[Prim, ...] = field(default_factory=tuple)
    annots: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return self.type != PrimType.INVALID

    @classmethod
    def from_json(cls, obj: Any) -> Prim:
        if isinstance(obj, list):
            return cls(PrimType.SEQ, args=tuple(cls.from_json(v) for v in obj))
        if not isinstance(obj, dict):
            raise ValueError(f"micheline: unexpected node {obj!r}")
        if "prim" in obj:
            return cls(
                PrimType.PRIM,
                op=obj["prim"],
                args=tuple(cls.from_json(v) for v in obj.get("args", [])),
                annots=tuple(obj.get("annots", [])),
            )
        if "int" in obj:
            return cls(PrimType.INT, int_value=int(obj["int"], 10))
        if "string" in obj:
            return cls(PrimType.STRING, str_value=obj["string"])
        if "bytes" in obj:
            return cls(PrimType.BYTES, bytes_value=bytes.fromhex(obj["bytes"]))
        raise ValueError(f"micheline: unknown node keys {sorted(obj)}")

    def to_json(self) -> Any:
        if self.type == PrimType.INT:
            return {"int": str(self.int_value)}
        if self.type == PrimType.STRING:
            return {"string": self.str_value}
        if self.type == PrimType.BYTES:
            return {"bytes": self.bytes_value.hex()}
        if self.type == PrimType.SEQ:
            return [a.to_json() for a in self.args]
        if self.type == PrimType.PRIM:
            out: dict[str, Any] = {"prim": self.op}
            if self.args:
                out["args"] = [a.to_json() for a in self.args]
            if self.annots:
                out["annots"] = list(self.annots)
            return out
        raise ValueError("micheline: cannot encode invalid prim")


INVALID_PRIM = Prim()


@dataclass
class Code:
    param: Prim = INVALID_PRIM
    storage: Prim = INVALID_PRIM
    code: Prim = INVALID_PRIM
    views: list[Prim] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Any) -> Code:
        if not isinstance(obj, list):
            raise ValueError(f"micheline: script code must be a sequence, got {obj!r}")
        c = cls()
        for node in obj:
            section = Prim.from_json(node)
            if section.type != PrimType.PRIM or not section.args:
                raise ValueError(f"micheline: malformed script section {node!r}")
            if section.op == "parameter":
                c.param = section.args[0]
            elif section.op == "storage":
                c.storage = section.args[0]
            elif section.op == "code":
                c.code = section.args[0]
            elif section.op == "view":
                c.views.append(section)
            else:
                raise ValueError(f"micheline: unknown script section {section.op!r}")
        return c


@dataclass
class Script:
    """Contract code together with its current storage value."""

    code: Code = field(default_factory=Code)
    storage: Prim = INVALID_PRIM

    @classmethod
    def from_json(cls, obj: Any) -> Script:
        return cls(
            code=Code.from_json(obj["code"]),
            storage=Prim.from_json(obj["storage"]),
        )
