import pytest

from pspcoin.errors import (
    CustomError,
    InsufficientAllowanceError,
    InsufficientBalanceError,
    PSP22Error,
)


ALL_ERRORS = [
    InsufficientBalanceError(),
    InsufficientAllowanceError(),
    CustomError("Overflow"),
]


@pytest.mark.parametrize("position", range(len(ALL_ERRORS)))
def test_all_errors_are_psp22_errors(position):
    error = ALL_ERRORS[position]
    with pytest.raises(PSP22Error) as excinfo:
        raise error
    caught = excinfo.value
    assert caught is error
    assert ALL_ERRORS.index(caught) == position


def test_custom_error_keeps_message():
    error = CustomError("Allowance overflow")
    assert error.message == "Allowance overflow"
    assert str(error) == "Allowance overflow"


def test_errors_of_same_kind_compare_equal():
    kinds = [
        CustomError("Overflow"),
        InsufficientAllowanceError(),
        InsufficientBalanceError(),
    ]
    assert kinds.index(InsufficientBalanceError()) == 2
    assert kinds.index(InsufficientAllowanceError()) == 1
    assert kinds.index(CustomError("Overflow")) == 0
    assert kinds.count(CustomError("Overflow")) == 1


def test_errors_of_different_kind_differ():
    assert not (InsufficientBalanceError() == InsufficientAllowanceError())
    assert not (CustomError("Overflow") == CustomError("Balance overflow"))


def test_equal_errors_hash_alike():
    errors = {CustomError("Overflow"), CustomError("Overflow"), InsufficientBalanceError()}
    assert len(errors) == 2