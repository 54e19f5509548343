"""Runtime options for the walkthrough, read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .assets import AssetParameters
from .tx_waiter import DEFAULT_MAX_ROUNDS

SANDBOX_ALGOD_TOKEN = "a" * 64


@dataclass(slots=True)
class WalkthroughOptions:
    algod_address: str = "http://localhost:4001"
    algod_token: str = SANDBOX_ALGOD_TOKEN
    funder_mnemonic: Optional[str] = None
    max_rounds: int = DEFAULT_MAX_ROUNDS
    funding_amount: int = 10_000_000
    transfer_amount: int = 1
    freeze_state: bool = True
    request_timeout: float = 30
    asset: AssetParameters = field(default_factory=AssetParameters)


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def options_from_env(env: Mapping[str, str]) -> WalkthroughOptions:
    defaults = WalkthroughOptions()
    return WalkthroughOptions(
        algod_address=env.get("ALGOD_ADDRESS") or defaults.algod_address,
        algod_token=env.get("ALGOD_TOKEN", defaults.algod_token),
        funder_mnemonic=env.get("MNEMONIC") or None,
        max_rounds=_env_int(env, "MAX_WAIT_ROUNDS", defaults.max_rounds),
        funding_amount=_env_int(env, "FUNDING_AMOUNT", defaults.funding_amount),
        transfer_amount=_env_int(env, "TRANSFER_AMOUNT", defaults.transfer_amount),
        freeze_state=_env_bool(env, "FREEZE_STATE", defaults.freeze_state),
        request_timeout=_env_float(env, "ALGOD_TIMEOUT", defaults.request_timeout),
    )


def load_options(env_file: Optional[str] = None) -> WalkthroughOptions:
    """Load a ``.env`` file (if any) into the process and build options from it."""

    load_dotenv(env_file)
    return options_from_env(os.environ)
