"""Exceptions raised by the adapters."""

from typing import Optional


class BuffiCastError(Exception):
    """Base class for everything raised by this package."""


class OracleTimeoutError(BuffiCastError):
    def __init__(self, request_id: int, waited: float):
        self.request_id = request_id
        super().__init__(f"VRF request {request_id} not fulfilled after {waited:.0f}s")


class TransactionFailedError(BuffiCastError):
    def __init__(self, tx_hash: str, detail: Optional[str] = None):
        self.tx_hash = tx_hash
        message = f"Transaction {tx_hash} reverted"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class StorageUploadError(BuffiCastError):
    """Pinning service answered without a CID."""


class EmptyScriptError(BuffiCastError):
    """Language model answered with no text blocks."""
