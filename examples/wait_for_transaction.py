"""Example waiting on an already submitted transaction using the Python package."""
import sys

from algosdk.v2client.algod import AlgodClient

from asa_walkthrough import AlgodNode, wait_for_confirmation


def main() -> None:
    tx_id = sys.argv[1]
    node = AlgodNode(AlgodClient("", "https://testnet-api.algonode.cloud"))
    confirmed_round = wait_for_confirmation(node, tx_id, max_rounds=5)

    print("Transaction:", tx_id)
    print("Confirmed round:", confirmed_round)


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()
