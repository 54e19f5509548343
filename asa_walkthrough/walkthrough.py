"""Public entry point for running the ASA walkthrough."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from algosdk.v2client.algod import AlgodClient

from .accounts import WalkthroughAccount, account_from_mnemonic, generate_account
from .assets import Assets
from .config import WalkthroughOptions
from .errors import WalkthroughError
from .node import AlgodNode, LedgerNode
from .tx_waiter import ConfirmationWaiter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalkthroughResult:
    creator: WalkthroughAccount
    receiver: WalkthroughAccount
    asset_id: int
    rounds: Dict[str, int] = field(default_factory=dict)


class AsaWalkthrough:
    """Creates, distributes and freezes an asset between two fresh accounts."""

    def __init__(
        self,
        options: Optional[WalkthroughOptions] = None,
        *,
        algod_client: Optional[AlgodClient] = None,
        node: Optional[LedgerNode] = None,
    ) -> None:
        self.options = options or WalkthroughOptions()

        self.algod_client = algod_client or AlgodClient(
            self.options.algod_token, self.options.algod_address
        )
        self.node = node or AlgodNode(self.algod_client, timeout=self.options.request_timeout)
        self.waiter = ConfirmationWaiter(self.node, self.options.max_rounds)
        self.assets = Assets(self.algod_client, self.waiter)

    def funder(self) -> WalkthroughAccount:
        if not self.options.funder_mnemonic:
            raise WalkthroughError.missing_mnemonic_error()
        return account_from_mnemonic(self.options.funder_mnemonic)

    def run(self) -> WalkthroughResult:
        funder = self.funder()
        creator = generate_account()
        receiver = generate_account()
        logger.info("Generated accounts %s and %s", creator.address, receiver.address)

        rounds: Dict[str, int] = {}
        amount = self.options.funding_amount
        rounds["fund_creator"] = self.assets.fund_account(funder, creator, amount)
        rounds["fund_receiver"] = self.assets.fund_account(funder, receiver, amount)

        asset_id, rounds["create_asset"] = self.assets.create_asset(
            creator, self.options.asset
        )
        rounds["opt_in"] = self.assets.opt_in(receiver, asset_id)
        rounds["transfer"] = self.assets.transfer(
            creator, receiver, asset_id, self.options.transfer_amount
        )
        rounds["freeze"] = self.assets.freeze(
            creator, receiver, asset_id, self.options.freeze_state
        )

        return WalkthroughResult(
            creator=creator, receiver=receiver, asset_id=asset_id, rounds=rounds
        )
