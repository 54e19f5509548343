"""Custom exceptions for the ASA walkthrough."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class WalkthroughError(Exception):
    """Base exception raised by the walkthrough."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def transaction_rejected_error(
        cls, tx_id: str, pool_error: str
    ) -> "RejectedTransactionError":
        return RejectedTransactionError(
            f"Transaction {tx_id} was rejected: {pool_error}",
            "TRANSACTION_REJECTED",
            {"tx_id": tx_id, "pool_error": pool_error},
        )

    @classmethod
    def confirmation_timeout_error(
        cls, tx_id: str, max_rounds: int, last_round: int
    ) -> "ConfirmationTimeoutError":
        return ConfirmationTimeoutError(
            f"Transaction {tx_id} not confirmed after {max_rounds} rounds",
            "CONFIRMATION_TIMEOUT",
            {"tx_id": tx_id, "max_rounds": max_rounds, "last_round": last_round},
        )

    @classmethod
    def wait_cancelled_error(cls, tx_id: str, last_round: int) -> "WaitCancelledError":
        return WaitCancelledError(
            "Confirmation wait was cancelled.",
            "WAIT_CANCELLED",
            {"tx_id": tx_id, "last_round": last_round},
        )

    @classmethod
    def network_failure_error(cls, operation: str, reason: str) -> "NetworkFailureError":
        return NetworkFailureError(
            f"algod {operation} failed: {reason}",
            "NETWORK_FAILURE",
            {"operation": operation, "reason": reason},
        )

    @classmethod
    def from_algod_error(cls, operation: str, exc: Exception) -> "NetworkFailureError":
        status = getattr(exc, "code", None)
        if isinstance(status, int):
            return NetworkFailureError(
                f"Algod Error {status} from {operation}: {exc}",
                "ALGOD_ERROR",
                {"operation": operation, "status": status, "message": str(exc)},
            )

        reason = getattr(exc, "reason", None) or exc
        return cls.network_failure_error(operation, str(reason))

    @classmethod
    def submission_failed_error(cls, tx_id: str, reason: str) -> "WalkthroughError":
        return cls(
            f"Submitting transaction {tx_id} failed: {reason}",
            "SUBMISSION_FAILED",
            {"tx_id": tx_id, "reason": reason},
        )

    @classmethod
    def missing_mnemonic_error(cls) -> "WalkthroughError":
        return cls(
            "A funder mnemonic is required. Set MNEMONIC or pass it in the options.",
            "MISSING_MNEMONIC",
        )

    @classmethod
    def invalid_mnemonic_error(cls, reason: str) -> "WalkthroughError":
        return cls(
            "The funder mnemonic could not be decoded.",
            "INVALID_MNEMONIC",
            {"reason": reason},
        )

    @classmethod
    def missing_asset_index_error(cls, tx_id: str) -> "WalkthroughError":
        return cls(
            "Asset creation confirmed without an asset index.",
            "MISSING_ASSET_INDEX",
            {"tx_id": tx_id},
        )


class RejectedTransactionError(WalkthroughError):
    """The node dropped the transaction from its pool."""


class ConfirmationTimeoutError(WalkthroughError):
    """The round budget ran out before the transaction was confirmed."""


class WaitCancelledError(WalkthroughError):
    """The caller aborted a confirmation wait."""


class NetworkFailureError(WalkthroughError):
    """A node query failed before returning a usable answer."""
