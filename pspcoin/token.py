"""A PSP-22 fungible token ledger with allowances, minting and burning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from pspcoin.errors import (
    CustomError,
    InsufficientAllowanceError,
    InsufficientBalanceError,
)

MAX_AMOUNT = 2**128 - 1

Address = Hashable


@dataclass(frozen=True)
class Transfer:
    """Tokens moved; ``from_`` is None on mint, ``to`` is None on burn."""

    from_: Optional[Address]
    to: Optional[Address]
    value: int


@dataclass(frozen=True)
class Approval:
    """An allowance was set to ``value``."""

    owner: Address
    spender: Address
    value: int


def _check_amount(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"amount must be an int, not {type(value).__name__}")
    if not 0 <= value <= MAX_AMOUNT:
        raise ValueError(f"amount out of range: {value}")
    return value


def _add(current: int, delta: int, message: str) -> int:
    total = current + delta
    if total > MAX_AMOUNT:
        raise CustomError(message)
    return total


class PspCoin:
    """A token ledger; every operation either succeeds whole or changes nothing."""

    def __init__(self) -> None:
        self._total_supply = 0
        self._balances: dict[Address, int] = {}
        self._allowances: dict[tuple[Address, Address], int] = {}
        self._metadata = ("PSP Coin", "PSP", 18)
        self.events: list[Transfer | Approval] = []

    @classmethod
    def with_supply(cls, caller: Address, initial_supply: int) -> "PspCoin":
        """Create a token whose whole initial supply belongs to ``caller``."""
        coin = cls()
        coin._total_supply = _check_amount(initial_supply)
        coin._balances[caller] = initial_supply
        return coin

    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, owner: Address) -> int:
        return self._balances.get(owner, 0)

    def allowance(self, owner: Address, spender: Address) -> int:
        return self._allowances.get((owner, spender), 0)

    def _move(self, from_: Address, to: Address, value: int) -> None:
        from_balance = self.balance_of(from_)
        if from_balance < value:
            raise InsufficientBalanceError()
        new_to = _add(self.balance_of(to), value, "Overflow")
        self._balances[from_] = from_balance - value
        self._balances[to] = new_to
        self.events.append(Transfer(from_, to, value))

    def transfer(self, caller: Address, to: Address, value: int, data: bytes = b"") -> None:
        """Move ``value`` tokens from ``caller`` to ``to``."""
        _check_amount(value)
        if caller == to or value == 0:
            return
        self._move(caller, to, value)

    def transfer_from(
        self,
        caller: Address,
        from_: Address,
        to: Address,
        value: int,
        data: bytes = b"",
    ) -> None:
        """Move tokens from ``from_`` to ``to``, spending ``caller``'s allowance."""
        _check_amount(value)
        if from_ == to or value == 0:
            return
        new_allowance = None
        if caller != from_:
            current = self.allowance(from_, caller)
            if current < value:
                raise InsufficientAllowanceError()
            new_allowance = current - value
        if self.balance_of(from_) < value:
            raise InsufficientBalanceError()
        _add(self.balance_of(to), value, "Overflow")
        if new_allowance is not None:
            self._allowances[(from_, caller)] = new_allowance
            self.events.append(Approval(from_, caller, new_allowance))
        self._move(from_, to, value)

    def approve(self, caller: Address, spender: Address, value: int) -> None:
        """Set ``spender``'s allowance over ``caller``'s tokens to ``value``."""
        _check_amount(value)
        if caller == spender:
            return
        self._allowances[(caller, spender)] = value
        self.events.append(Approval(caller, spender, value))

    def increase_allowance(self, caller: Address, spender: Address, delta_value: int) -> None:
        _check_amount(delta_value)
        if caller == spender or delta_value == 0:
            return
        new_allowance = _add(
            self.allowance(caller, spender), delta_value, "Allowance overflow"
        )
        self._allowances[(caller, spender)] = new_allowance
        self.events.append(Approval(caller, spender, new_allowance))

    def decrease_allowance(self, caller: Address, spender: Address, delta_value: int) -> None:
        _check_amount(delta_value)
        if caller == spender or delta_value == 0:
            return
        current = self.allowance(caller, spender)
        if current < delta_value:
            raise InsufficientAllowanceError()
        new_allowance = current - delta_value
        self._allowances[(caller, spender)] = new_allowance
        self.events.append(Approval(caller, spender, new_allowance))

    def name(self) -> Optional[str]:
        return self._metadata[0]

    def symbol(self) -> Optional[str]:
        return self._metadata[1]

    def decimals(self) -> int:
        return self._metadata[2]

    def mint(self, caller: Address, value: int) -> None:
        """Create ``value`` new tokens in ``caller``'s account."""
        _check_amount(value)
        if value == 0:
            return
        new_balance = _add(self.balance_of(caller), value, "Balance overflow")
        new_supply = _add(self._total_supply, value, "Max supply exceeded")
        self._balances[caller] = new_balance
        self._total_supply = new_supply
        self.events.append(Transfer(None, caller, value))

    def burn(self, caller: Address, value: int) -> None:
        """Destroy ``value`` tokens from ``caller``'s account."""
        _check_amount(value)
        if value == 0:
            return
        current = self.balance_of(caller)
        if current < value or self._total_supply < value:
            raise InsufficientBalanceError()
        self._balances[caller] = current - value
        self._total_supply -= value
        self.events.append(Transfer(caller, None, value))