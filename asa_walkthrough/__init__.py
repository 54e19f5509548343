"""Algorand standard asset walkthrough with bounded confirmation waits."""
from .accounts import WalkthroughAccount, account_from_mnemonic, generate_account
from .assets import AssetParameters, Assets
from .config import WalkthroughOptions, load_options
from .errors import (
    ConfirmationTimeoutError,
    NetworkFailureError,
    RejectedTransactionError,
    WaitCancelledError,
    WalkthroughError,
)
from .node import AlgodNode, LedgerNode, NodeStatus, PendingStatus
from .pending_transaction import PendingTransaction
from .tx_waiter import DEFAULT_MAX_ROUNDS, ConfirmationWaiter, wait_for_confirmation
from .walkthrough import AsaWalkthrough, WalkthroughResult

__all__ = [
    "AlgodNode",
    "AsaWalkthrough",
    "AssetParameters",
    "Assets",
    "ConfirmationTimeoutError",
    "ConfirmationWaiter",
    "DEFAULT_MAX_ROUNDS",
    "LedgerNode",
    "NetworkFailureError",
    "NodeStatus",
    "PendingStatus",
    "PendingTransaction",
    "RejectedTransactionError",
    "WaitCancelledError",
    "WalkthroughAccount",
    "WalkthroughError",
    "WalkthroughOptions",
    "WalkthroughResult",
    "account_from_mnemonic",
    "generate_account",
    "load_options",
    "wait_for_confirmation",
]
