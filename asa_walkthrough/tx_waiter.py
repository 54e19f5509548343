"""Utilities for waiting on transaction confirmation."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import WalkthroughError
from .node import LedgerNode, PendingStatus

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 3


@dataclass(slots=True)
class ConfirmationWaiter:
    """Polls a node until a transaction is confirmed, rejected, or out of rounds.

    Each call to :meth:`wait` reads the node's last round and then alternates
    between a pending-info query and a wait for the next round. At most
    ``max_rounds`` round-waits are performed before giving up.
    """

    node: LedgerNode
    max_rounds: int = DEFAULT_MAX_ROUNDS

    def __post_init__(self) -> None:
        _validate_max_rounds(self.max_rounds)

    def wait(
        self,
        tx_id: str,
        max_rounds: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> PendingStatus:
        if not tx_id:
            raise ValueError("Invalid transaction id: must be a non-empty string")
        budget = self.max_rounds if max_rounds is None else _validate_max_rounds(max_rounds)

        current_round = self.node.get_status().last_round
        rounds_waited = 0
        while True:
            pending = self.node.get_pending_transaction_info(tx_id)
            logger.debug(
                "Polled %s at round %d: confirmed-round=%d pool-error=%r",
                tx_id,
                current_round,
                pending.confirmed_round,
                pending.pool_error,
            )
            if pending.is_confirmed:
                logger.info("Transaction %s confirmed in round %d", tx_id, pending.confirmed_round)
                return pending
            if pending.is_rejected:
                raise WalkthroughError.transaction_rejected_error(tx_id, pending.pool_error)
            if rounds_waited >= budget:
                raise WalkthroughError.confirmation_timeout_error(tx_id, budget, current_round)
            if cancel_event is not None and cancel_event.is_set():
                raise WalkthroughError.wait_cancelled_error(tx_id, current_round)

            current_round += 1
            self.node.wait_for_round(current_round)
            rounds_waited += 1


def wait_for_confirmation(
    node: LedgerNode,
    tx_id: str,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    cancel_event: Optional[threading.Event] = None,
) -> int:
    """Block until ``tx_id`` is confirmed and return its confirmed round."""

    waiter = ConfirmationWaiter(node, max_rounds)
    return waiter.wait(tx_id, cancel_event=cancel_event).confirmed_round


def _validate_max_rounds(max_rounds: int) -> int:
    if isinstance(max_rounds, bool) or int(max_rounds) != max_rounds or max_rounds < 1:
        raise ValueError("Invalid max_rounds: must be a positive integer")
    return int(max_rounds)
