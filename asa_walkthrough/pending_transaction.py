"""Representation of a transaction submitted to algod."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .node import PendingStatus

WaitDelegate = Callable[[str], PendingStatus]


@dataclass(slots=True)
class PendingTransaction:
    transaction_id: str
    _wait_delegate: WaitDelegate

    def wait(self) -> PendingStatus:
        """Block until the transaction is confirmed in a round."""

        return self._wait_delegate(self.transaction_id)
