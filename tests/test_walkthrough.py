from urllib.error import URLError

import pytest
from algosdk import constants

from asa_walkthrough import cli
from asa_walkthrough.accounts import generate_account
from asa_walkthrough.config import WalkthroughOptions
from asa_walkthrough.errors import WalkthroughError
from asa_walkthrough.walkthrough import AsaWalkthrough

from tests.fakes import ConfirmingNode, FakeAlgodClient


@pytest.fixture
def funder():
    return generate_account()


def test_run_sequences_all_steps(funder, algod_client, node):
    options = WalkthroughOptions(funder_mnemonic=funder.mnemonic, transfer_amount=3)
    walkthrough = AsaWalkthrough(options, algod_client=algod_client, node=node)

    result = walkthrough.run()

    kinds = [signed.transaction.type for signed in algod_client.sent]
    assert kinds == [
        constants.payment_txn,
        constants.payment_txn,
        constants.assetconfig_txn,
        constants.assettransfer_txn,
        constants.assettransfer_txn,
        constants.assetfreeze_txn,
    ]
    fund_a, fund_b, create, opt_in, transfer, freeze = (s.transaction for s in algod_client.sent)
    assert fund_a.sender == fund_b.sender == funder.address
    assert {fund_a.receiver, fund_b.receiver} == {
        result.creator.address,
        result.receiver.address,
    }
    assert create.sender == result.creator.address
    assert opt_in.sender == opt_in.receiver == result.receiver.address
    assert transfer.amount == 3
    assert freeze.target == result.receiver.address
    assert freeze.new_freeze_state is True
    assert result.asset_id == 4242
    assert result.rounds["create_asset"] == 500
    assert set(result.rounds) == {
        "fund_creator",
        "fund_receiver",
        "create_asset",
        "opt_in",
        "transfer",
        "freeze",
    }
    assert len(node.polls) == 6


def test_run_requires_funder_mnemonic(algod_client, node):
    walkthrough = AsaWalkthrough(WalkthroughOptions(), algod_client=algod_client, node=node)

    with pytest.raises(WalkthroughError) as excinfo:
        walkthrough.run()

    assert excinfo.value.code == "MISSING_MNEMONIC"
    assert algod_client.sent == []


def test_waiter_uses_configured_budget(algod_client, node):
    walkthrough = AsaWalkthrough(
        WalkthroughOptions(max_rounds=7), algod_client=algod_client, node=node
    )

    assert walkthrough.waiter.max_rounds == 7


def test_cli_returns_error_status_on_walkthrough_error(monkeypatch):
    monkeypatch.delenv("MNEMONIC", raising=False)
    monkeypatch.setattr(cli, "load_options", lambda env_file: WalkthroughOptions())

    assert cli.main(["--log-level", "error"]) == 1


def test_cli_applies_overrides(monkeypatch, funder):
    captured = {}

    class RecordingWalkthrough:
        def __init__(self, options):
            captured["options"] = options
            self._inner = AsaWalkthrough(
                options, algod_client=FakeAlgodClient(), node=ConfirmingNode()
            )

        def run(self):
            return self._inner.run()

    monkeypatch.setattr(
        cli, "load_options", lambda env_file: WalkthroughOptions(funder_mnemonic=funder.mnemonic)
    )
    monkeypatch.setattr(cli, "AsaWalkthrough", RecordingWalkthrough)

    status = cli.main(["--max-rounds", "9", "--algod-address", "http://node:4001"])

    assert status == 0
    assert captured["options"].max_rounds == 9
    assert captured["options"].algod_address == "http://node:4001"
    assert captured["options"].transfer_amount == 1


@pytest.mark.parametrize("max_rounds", ["0", "-2", "soon"])
def test_cli_rejects_invalid_max_rounds(max_rounds):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--max-rounds", max_rounds])

    assert excinfo.value.code == 2


def test_cli_reports_invalid_environment(monkeypatch):
    monkeypatch.setenv("MAX_WAIT_ROUNDS", "soon")

    assert cli.main([]) == 1


def test_cli_reports_invalid_budget_from_environment(monkeypatch):
    monkeypatch.setenv("MAX_WAIT_ROUNDS", "0")

    assert cli.main([]) == 1


def test_cli_reports_unreachable_node(monkeypatch, funder):
    class DownClient(FakeAlgodClient):
        def __init__(self):
            super().__init__(params_error=URLError("connection refused"))

    def build(options):
        return AsaWalkthrough(options, algod_client=DownClient(), node=ConfirmingNode())

    monkeypatch.setattr(
        cli, "load_options", lambda env_file: WalkthroughOptions(funder_mnemonic=funder.mnemonic)
    )
    monkeypatch.setattr(cli, "AsaWalkthrough", build)

    assert cli.main([]) == 1


def test_cli_no_freeze_flag(monkeypatch, funder):
    captured = {}

    def build(options):
        captured["options"] = options
        return AsaWalkthrough(options, algod_client=FakeAlgodClient(), node=ConfirmingNode())

    monkeypatch.setattr(
        cli, "load_options", lambda env_file: WalkthroughOptions(funder_mnemonic=funder.mnemonic)
    )
    monkeypatch.setattr(cli, "AsaWalkthrough", build)

    assert cli.main(["--no-freeze"]) == 0
    assert captured["options"].freeze_state is False
