from tezrpc.block import (
    GENESIS,
    HEAD,
    BlockAlias,
    BlockHash,
    BlockID,
    BlockLevel,
    parse_block_id,
)
from tezrpc.client import Client
from tezrpc.config import CHAIN_ID, RPC_URLS
from tezrpc.micheline import INVALID_PRIM, Code, Prim, PrimType, Script
from tezrpc.rpc import RPCClient, new_rpc_client
from tezrpc.state import BigmapInfo, Contracts
from tezrpc.tezos import Address, AddressType, ExprHash

__all__ = [
    "Client",
    "CHAIN_ID",
    "RPC_URLS",
    "RPCClient",
    "new_rpc_client",
    "BlockAlias",
    "BlockHash",
    "BlockID",
    "BlockLevel",
    "GENESIS",
    "HEAD",
    "parse_block_id",
    "Address",
    "AddressType",
    "ExprHash",
    "Code",
    "INVALID_PRIM",
    "Prim",
    "PrimType",
    "Script",
    "BigmapInfo",
    "Contracts",
]
