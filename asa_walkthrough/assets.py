"""Asset (ASA) transactions used by the walkthrough."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, Tuple
from urllib.error import URLError

from algosdk import transaction
from algosdk.atomic_transaction_composer import AccountTransactionSigner
from algosdk.error import AlgodHTTPError

from .accounts import WalkthroughAccount
from .errors import WalkthroughError
from .node import call_algod
from .pending_transaction import PendingTransaction
from .tx_waiter import ConfirmationWaiter

logger = logging.getLogger(__name__)


class TransactionSubmitter(Protocol):
    def suggested_params(self, **kwargs: Any) -> transaction.SuggestedParams:
        ...

    def send_transaction(self, txn: transaction.GenericSignedTransaction, **kwargs: Any) -> str:
        ...


@dataclass(frozen=True, slots=True)
class AssetParameters:
    unit_name: str = "DIE"
    asset_name: str = "Death"
    total: int = 1000
    decimals: int = 0
    default_frozen: bool = False

    def __post_init__(self) -> None:
        if self.total < 1:
            raise ValueError("Invalid total: must be a positive integer")
        if not 0 <= self.decimals <= 19:
            raise ValueError("Invalid decimals: must be between 0 and 19")
        if len(self.unit_name.encode()) > 8:
            raise ValueError("Invalid unit name: at most 8 bytes")
        if len(self.asset_name.encode()) > 32:
            raise ValueError("Invalid asset name: at most 32 bytes")


@dataclass(slots=True)
class Assets:
    """Service that builds, signs and submits asset transactions."""

    algod_client: TransactionSubmitter
    waiter: ConfirmationWaiter

    def suggested_params(self) -> transaction.SuggestedParams:
        return call_algod("suggested_params", self.algod_client.suggested_params)

    def submit(self, txn: transaction.Transaction, signer: WalkthroughAccount) -> PendingTransaction:
        signed = AccountTransactionSigner(signer.private_key).sign_transactions([txn], [0])[0]
        tx_id = txn.get_txid()
        try:
            self.algod_client.send_transaction(signed)
        except AlgodHTTPError as exc:
            raise WalkthroughError.submission_failed_error(tx_id, str(exc)) from exc
        except (URLError, TimeoutError) as exc:
            raise WalkthroughError.from_algod_error("send_transaction", exc) from exc
        logger.debug("Submitted %s transaction %s", txn.type, tx_id)
        return PendingTransaction(transaction_id=tx_id, _wait_delegate=self.waiter.wait)

    def fund_account(
        self, funder: WalkthroughAccount, account: WalkthroughAccount, amount: int
    ) -> int:
        if amount < 0:
            raise ValueError("Invalid amount: must be a non-negative integer")
        txn = transaction.PaymentTxn(
            sender=funder.address,
            sp=self.suggested_params(),
            receiver=account.address,
            amt=amount,
        )
        status = self.submit(txn, funder).wait()
        logger.info("Successfully funded account: %s", account.address)
        return status.confirmed_round

    def create_asset(
        self, creator: WalkthroughAccount, params: AssetParameters
    ) -> Tuple[int, int]:
        """Create the asset and return its id with the round that confirmed it."""

        txn = transaction.AssetConfigTxn(
            sender=creator.address,
            sp=self.suggested_params(),
            total=params.total,
            default_frozen=params.default_frozen,
            unit_name=params.unit_name,
            asset_name=params.asset_name,
            manager=creator.address,
            reserve=creator.address,
            freeze=creator.address,
            clawback=creator.address,
            decimals=params.decimals,
        )
        pending = self.submit(txn, creator)
        status = pending.wait()
        if status.asset_index is None:
            raise WalkthroughError.missing_asset_index_error(pending.transaction_id)
        logger.info("Asset ID: %d", status.asset_index)
        return status.asset_index, status.confirmed_round

    def opt_in(self, account: WalkthroughAccount, asset_id: int) -> int:
        txn = transaction.AssetTransferTxn(
            sender=account.address,
            sp=self.suggested_params(),
            receiver=account.address,
            amt=0,
            index=asset_id,
        )
        status = self.submit(txn, account).wait()
        logger.info("%s opted into asset %d", account.address, asset_id)
        return status.confirmed_round

    def transfer(
        self,
        sender: WalkthroughAccount,
        receiver: WalkthroughAccount,
        asset_id: int,
        amount: int,
    ) -> int:
        if amount < 0:
            raise ValueError("Invalid amount: must be a non-negative integer")
        txn = transaction.AssetTransferTxn(
            sender=sender.address,
            sp=self.suggested_params(),
            receiver=receiver.address,
            amt=amount,
            index=asset_id,
        )
        status = self.submit(txn, sender).wait()
        logger.info(
            "Transferred %d units of asset %d to %s", amount, asset_id, receiver.address
        )
        return status.confirmed_round

    def freeze(
        self,
        manager: WalkthroughAccount,
        target: WalkthroughAccount,
        asset_id: int,
        freeze_state: bool,
    ) -> int:
        txn = transaction.AssetFreezeTxn(
            sender=manager.address,
            sp=self.suggested_params(),
            index=asset_id,
            target=target.address,
            new_freeze_state=freeze_state,
        )
        status = self.submit(txn, manager).wait()
        logger.info(
            "%s is now %s for asset %d",
            target.address,
            "frozen" if freeze_state else "unfrozen",
            asset_id,
        )
        return status.confirmed_round
