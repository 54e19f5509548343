"""Read-only views of an algod node used while waiting on transactions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Protocol, TypeVar
from urllib.error import URLError

from algosdk.error import AlgodHTTPError
from algosdk.v2client.algod import AlgodClient

from .errors import WalkthroughError

T = TypeVar("T")

# Failures raised by AlgodClient when a request never produces a usable answer
ALGOD_FAILURES = (AlgodHTTPError, URLError, TimeoutError)


@dataclass(slots=True)
class NodeStatus:
    last_round: int
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NodeStatus":
        return cls(last_round=int(payload.get("last-round", 0)), raw=payload)


@dataclass(slots=True)
class PendingStatus:
    """Disposition of a submitted transaction as reported by the node."""

    confirmed_round: int = 0
    pool_error: str = ""
    asset_index: Optional[int] = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_round > 0

    @property
    def is_rejected(self) -> bool:
        return bool(self.pool_error)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PendingStatus":
        asset_index = payload.get("asset-index")
        return cls(
            confirmed_round=int(payload.get("confirmed-round") or 0),
            pool_error=payload.get("pool-error") or "",
            asset_index=int(asset_index) if asset_index is not None else None,
            raw=payload,
        )


class LedgerNode(Protocol):
    def get_status(self) -> NodeStatus:
        ...

    def get_pending_transaction_info(self, tx_id: str) -> PendingStatus:
        ...

    def wait_for_round(self, round_number: int) -> NodeStatus:
        ...


def call_algod(operation: str, request: Callable[[], T]) -> T:
    """Run an algod request, raising :class:`NetworkFailureError` when it fails."""

    try:
        return request()
    except ALGOD_FAILURES as exc:
        raise WalkthroughError.from_algod_error(operation, exc) from exc


@dataclass(slots=True)
class AlgodNode:
    """:class:`LedgerNode` backed by the SDK's :class:`AlgodClient`."""

    algod_client: AlgodClient
    timeout: float = 30
    # algod holds wait-for-block-after open for up to a minute
    round_wait_timeout: float = 90

    def get_status(self) -> NodeStatus:
        payload = call_algod("status", lambda: self.algod_client.status(timeout=self.timeout))
        return NodeStatus.from_payload(payload)

    def get_pending_transaction_info(self, tx_id: str) -> PendingStatus:
        payload = call_algod(
            "pending_transaction_info",
            lambda: self.algod_client.pending_transaction_info(tx_id, timeout=self.timeout),
        )
        return PendingStatus.from_payload(payload)

    def wait_for_round(self, round_number: int) -> NodeStatus:
        if round_number < 0:
            raise ValueError("Invalid round: must be a non-negative integer")
        payload = call_algod(
            "status_after_block",
            lambda: self.algod_client.status_after_block(
                round_number, timeout=self.round_wait_timeout
            ),
        )
        return NodeStatus.from_payload(payload)
