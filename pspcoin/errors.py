"""Errors raised by PSP-22 token operations."""


class PSP22Error(Exception):
    """Base class for every error a PSP-22 token operation can raise."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PSP22Error):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InsufficientBalanceError(PSP22Error):
    """The account does not hold enough tokens for the operation."""

    def __init__(self) -> None:
        super().__init__("insufficient balance")


class InsufficientAllowanceError(PSP22Error):
    """The spender's allowance is too small for the operation."""

    def __init__(self) -> None:
        super().__init__("insufficient allowance")


class CustomError(PSP22Error):
    """Any other failure, described by a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message