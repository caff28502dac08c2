"""RPC client for querying contracts and bigmap storage."""

from __future__ import annotations

from typing import Any, Protocol

from tezrpc.block import HEAD, BlockID, BlockLevel
from tezrpc.config import CHAIN_ID, RPC_URLS
from tezrpc.micheline import Prim, Script
from tezrpc.rpc import new_rpc_client
from tezrpc.state import BigmapInfo, Contracts, parse_int64
from tezrpc.tezos import Address, ExprHash


class NodeClient(Protocol):
    async def get(self, path: str) -> Any: ...

    async def aclose(self) -> None: ...


class Client:
    """Read-only client for contract and bigmap context data."""

    def __init__(self, rpc: NodeClient, chain: str = CHAIN_ID) -> None:
        self._rpc = rpc
        self._chain = chain

    @classmethod
    def from_env(cls, env: str) -> Client:
        """Create a client configured for the given environment.

        Args:
            env: Environment name ("mainnet", "ghostnet", "localnet")
        """
        return cls(new_rpc_client(RPC_URLS[env]))

    @classmethod
    def mainnet(cls) -> Client:
        return cls.from_env("mainnet")

    @classmethod
    def ghostnet(cls) -> Client:
        return cls.from_env("ghostnet")

    @classmethod
    def localnet(cls) -> Client:
        return cls.from_env("localnet")

    async def aclose(self) -> None:
        await self._rpc.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # -- Contracts --

    async def get_contracts(self, block: BlockID = HEAD) -> Contracts:
        """List all known contracts at block."""
        data = await self._get(f"blocks/{block}/context/contracts")
        return [Address.from_string(s) for s in data]

    async def get_contracts_height(self, height: int) -> Contracts:
        """Like get_contracts at BlockLevel(height); a negative height raises ValueError."""
        return await self.get_contracts(BlockLevel(height))

    async def get_contract_balance(
        self, addr: Address, block: BlockID = HEAD
    ) -> int:
        """Return the balance of a contract at block in mutez."""
        bal = await self._get(f"blocks/{block}/context/contracts/{addr}/balance")
        return parse_int64(bal)

    async def get_contract_balance_height(self, addr: Address, height: int) -> int:
        """Like get_contract_balance at BlockLevel(height); a negative height raises ValueError."""
        return await self.get_contract_balance(addr, BlockLevel(height))

    async def get_contract_script(self, addr: Address) -> Script:
        """Return the originated contract's code and current storage."""
        data = await self._get(f"blocks/{HEAD}/context/contracts/{addr}/script")
        return Script.from_json(data)

    async def get_contract_storage(
        self, addr: Address, block: BlockID = HEAD
    ) -> Prim:
        data = await self._get(f"blocks/{block}/context/contracts/{addr}/storage")
        return Prim.from_json(data)

    async def get_contract_storage_height(self, addr: Address, height: int) -> Prim:
        """Like get_contract_storage at BlockLevel(height); a negative height raises ValueError."""
        return await self.get_contract_storage(addr, BlockLevel(height))

    async def get_contract_entrypoints(self, addr: Address) -> dict[str, Prim]:
        """Return the contract's entrypoints keyed by name."""
        data = await self._get(f"blocks/{HEAD}/context/contracts/{addr}/entrypoints")
        # a response without the wrapper field carries no entrypoints
        eps = data.get("entrypoints") or {}
        return {name: Prim.from_json(typ) for name, typ in eps.items()}

    # -- Bigmaps --

    async def get_bigmap_keys(
        self, bigmap: int, block: BlockID = HEAD
    ) -> list[ExprHash]:
        """Return the hashes of all keys ever written to bigmap up to block.

        Keys that were later removed are included.
        """
        data = await self._get(
            f"blocks/{block}/context/raw/json/big_maps/index/{bigmap}/contents"
        )
        return [ExprHash.from_string(s) for s in data]

    async def get_active_bigmap_keys(self, bigmap: int) -> list[ExprHash]:
        return await self.get_bigmap_keys(bigmap, HEAD)

    async def get_bigmap_value(
        self, bigmap: int, key_hash: ExprHash, block: BlockID = HEAD
    ) -> Prim:
        data = await self._get(
            f"blocks/{block}/context/raw/json/big_maps/index/{bigmap}/contents/{key_hash}"
        )
        return Prim.from_json(data)

    async def get_active_bigmap_value(self, bigmap: int, key_hash: ExprHash) -> Prim:
        return await self.get_bigmap_value(bigmap, key_hash, HEAD)

    async def get_bigmap_value_height(
        self, bigmap: int, key_hash: ExprHash, height: int
    ) -> Prim:
        """Like get_bigmap_value at BlockLevel(height); a negative height raises ValueError."""
        return await self.get_bigmap_value(bigmap, key_hash, BlockLevel(height))

    async def get_bigmap_info(
        self, bigmap: int, block: BlockID = HEAD
    ) -> BigmapInfo:
        """Return key/value types and total byte size of bigmap at block."""
        data = await self._get(f"blocks/{block}/context/raw/json/big_maps/index/{bigmap}")
        return BigmapInfo.from_json(data)

    async def get_active_bigmap_info(self, bigmap: int) -> BigmapInfo:
        return await self.get_bigmap_info(bigmap, HEAD)

    # -- Internal helpers --

    async def _get(self, path: str) -> Any:
        return await self._rpc.get(f"chains/{self._chain}/{path}")
