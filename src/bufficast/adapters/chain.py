"""Thin web3 wrapper shared by the oracle and blockchain adapters."""

from typing import Any, Dict, List, Optional

from web3 import Web3

from bufficast.errors import TransactionFailedError
from bufficast.logging_utils import get_logger

logger = get_logger(__name__)


class ChainClient:
    """One RPC endpoint plus the local signing account."""

    def __init__(self, rpc_url: str, private_key: str, tx_timeout: float = 180):
        self.w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": 60}))
        self.account = self.w3.eth.account.from_key(private_key)
        self._tx_timeout = tx_timeout
        self._rpc_url = rpc_url

    @property
    def address(self) -> str:
        return self.account.address

    def contract(self, address: str, abi: List[Dict[str, Any]]):
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    def simulate(self, fn) -> Any:
        """eth_call the function as our account (return values of state-changing calls)."""
        return fn.call({"from": self.address})

    def send(self, fn, label: Optional[str] = None) -> str:
        """Build, sign and send a contract call; block until mined. Returns the 0x tx hash."""
        return Web3.to_hex(self.transact(fn, label)["transactionHash"])

    def transact(self, fn, label: Optional[str] = None):
        """Like `send`, but returns the receipt (for decoding emitted events)."""
        # count pending txs too; concurrent runs share this key
        tx = fn.build_transaction({
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "chainId": self.w3.eth.chain_id,
        })
        signed = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        hex_hash = Web3.to_hex(tx_hash)
        logger.info("Sent %s tx %s via %s", label or "contract", hex_hash, self._rpc_url)

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self._tx_timeout)
        if receipt["status"] != 1:
            raise TransactionFailedError(hex_hash, label)
        logger.info("Mined %s tx %s in block %s", label or "contract", hex_hash, receipt["blockNumber"])
        return receipt
