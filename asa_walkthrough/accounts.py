"""Account helpers built on the Algorand SDK."""
from __future__ import annotations

from dataclasses import dataclass

from algosdk import account, error, mnemonic

from .errors import WalkthroughError


@dataclass(frozen=True, slots=True)
class WalkthroughAccount:
    address: str
    private_key: str

    @property
    def mnemonic(self) -> str:
        return mnemonic.from_private_key(self.private_key)

    def __repr__(self) -> str:
        return f"WalkthroughAccount(address={self.address!r})"


def generate_account() -> WalkthroughAccount:
    private_key, address = account.generate_account()
    return WalkthroughAccount(address=address, private_key=private_key)


def account_from_mnemonic(phrase: str) -> WalkthroughAccount:
    if not phrase or not phrase.strip():
        raise WalkthroughError.missing_mnemonic_error()
    try:
        private_key = mnemonic.to_private_key(" ".join(phrase.split()))
    except (error.WrongMnemonicLengthError, error.WrongChecksumError, KeyError, ValueError) as exc:
        raise WalkthroughError.invalid_mnemonic_error(str(exc)) from exc
    return WalkthroughAccount(
        address=account.address_from_private_key(private_key),
        private_key=private_key,
    )
