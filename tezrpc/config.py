"""Network configuration for the Tezos node RPC."""

CHAIN_ID = "main"

RPC_URLS = {
    "mainnet": "https://rpc.tzbeta.net",
    "ghostnet": "https://rpc.ghostnet.teztnets.com",
    "localnet": "http://localhost:8732",
}
