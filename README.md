# pspcoin

`pspcoin` is a small in-memory ledger for a PSP-22 style fungible token. It
tracks balances and spending allowances, and it supports minting and burning.
Every change that succeeds appends a `Transfer` or `Approval` event to the
ledger's `events` list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Every operation that changes state takes the acting account, the `caller`,
as its first argument. An account can be any hashable value, such as a
string.

```python
from pspcoin.token import PspCoin
from pspcoin.errors import InsufficientBalanceError

coin = PspCoin.with_supply("alice", 1000)
coin.total_supply()            # 1000
coin.balance_of("alice")       # 1000

coin.transfer("alice", "bob", 100, b"")
coin.balance_of("bob")         # 100

coin.approve("alice", "bob", 200)
coin.transfer_from("bob", "alice", "charlie", 100, b"")
coin.allowance("alice", "bob") # 100

coin.increase_allowance("alice", "bob", 50)
coin.decrease_allowance("alice", "bob", 30)

coin.mint("alice", 500)
coin.burn("alice", 300)

try:
    coin.transfer("bob", "alice", 10_000, b"")
except InsufficientBalanceError:
    ...
```

`PspCoin()` creates a token with a supply of zero. The token's metadata is
fixed: `name()` returns `"PSP Coin"`, `symbol()` returns `"PSP"` and
`decimals()` returns `18`. The `data` argument of `transfer` and
`transfer_from` is optional and is not used.

## Events

`coin.events` is a list of the events recorded so far, oldest first:

- `Transfer(from_, to, value)`: tokens moved. `from_` is `None` for a mint and
  `to` is `None` for a burn.
- `Approval(owner, spender, value)`: an allowance was set to `value`. A
  `transfer_from` by someone other than the owner records the reduced
  allowance before the transfer.

## Behaviour

- A transfer of zero, or a transfer to the sender's own account, does nothing.
  The same holds for approving oneself, for changing one's own allowance, for a
  delta of zero, and for minting or burning zero.
- In `transfer_from`, the allowance is checked and reduced only when the caller
  is not the owner.
- An operation that fails leaves balances, allowances, supply and events
  unchanged.
- Amounts are unsigned 128-bit values. An amount that is not an `int` raises
  `TypeError`; one below zero or above `2**128 - 1` raises `ValueError`. An
  operation whose result would exceed that range raises `CustomError`.

## Errors

Every token failure raises a subclass of `pspcoin.errors.PSP22Error`:

- `InsufficientBalanceError`: the account holds too few tokens.
- `InsufficientAllowanceError`: the allowance is too small for the spend or
  the decrease.
- `CustomError`: any other failure, such as an overflow. Its `message`
  attribute says which: `"Overflow"`, `"Allowance overflow"`,
  `"Balance overflow"` or `"Max supply exceeded"`.

Errors compare equal when they are of the same class with the same message.

## What it does not do

The ledger lives only in memory. It does not save its state, run on or talk
to any network, or check who a caller is: whoever calls a method names the
acting account.