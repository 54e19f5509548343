"""Command line entry point for the ASA walkthrough."""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from typing import List, Optional

from .config import load_options
from .errors import WalkthroughError
from .walkthrough import AsaWalkthrough

logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    return value


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asa-walkthrough",
        description=(
            "Fund two fresh accounts, create an asset, opt in, transfer and freeze it."
        ),
    )
    parser.add_argument("--env-file", help="Path to a .env file with MNEMONIC and algod settings")
    parser.add_argument("--algod-address", help="algod URL, e.g. http://localhost:4001")
    parser.add_argument("--algod-token", help="algod API token")
    parser.add_argument(
        "--max-rounds",
        type=_positive_int,
        help="Rounds to wait for each confirmation before giving up",
    )
    parser.add_argument(
        "--transfer-amount", type=_non_negative_int, help="Asset units sent to the receiver"
    )
    parser.add_argument(
        "--freeze",
        dest="freeze_state",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Freeze (or with --no-freeze, unfreeze) the asset for the receiver",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        "algod_address": args.algod_address,
        "algod_token": args.algod_token,
        "max_rounds": args.max_rounds,
        "transfer_amount": args.transfer_amount,
        "freeze_state": args.freeze_state,
    }
    try:
        options = load_options(args.env_file)
        options = replace(options, **{k: v for k, v in overrides.items() if v is not None})
        walkthrough = AsaWalkthrough(options)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        result = walkthrough.run()
    except WalkthroughError as exc:
        logger.error("%s (%s) %s", exc.message, exc.code, dict(exc.details or {}))
        return 1

    logger.info(
        "Walkthrough complete: asset %d held by %s, frozen=%s",
        result.asset_id,
        result.receiver.address,
        options.freeze_state,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
