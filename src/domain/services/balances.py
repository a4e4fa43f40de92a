"""Account balance derivation."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import (
    ALL_FILTER,
    APPROVED,
    EXPENSE,
    INCOME,
    TRANSFER,
)
from src.domain.models import Account, CalculatedAccount, Transaction


def compute_account_balance(
    account: Account,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Derive an account balance from its opening balance.

    Incomes add, expenses subtract, transfers subtract on the source account
    and add on the destination account. Only approved transactions count.

    Args:
        account: Account with its stored opening balance.
        transactions: Full transaction list.

    Returns:
        Decimal: Current balance.
    """
    balance = account.opening_balance
    for txn in transactions:
        if txn.status != APPROVED:
            continue
        if txn.type == INCOME and txn.account_id == account.id:
            balance += txn.amount
        elif txn.type == EXPENSE and txn.account_id == account.id:
            balance -= txn.amount
        elif txn.type == TRANSFER:
            if txn.account_id == account.id:
                balance -= txn.amount
            if txn.to_account_id == account.id:
                balance += txn.amount
    return balance


def calculate_accounts(
    accounts: Iterable[Account],
    transactions: Sequence[Transaction],
) -> list[CalculatedAccount]:
    """Return every account with its derived balance, in input order."""
    return [
        CalculatedAccount(
            account=account,
            balance=compute_account_balance(account, transactions),
        )
        for account in accounts
    ]


def select_accounts(items: Iterable, account_id: str) -> list:
    """Keep every item when ``account_id`` is ``"all"``, else the match.

    Works for both ``Account`` and ``CalculatedAccount`` items.
    """
    if account_id == ALL_FILTER:
        return list(items)
    return [item for item in items if item.id == account_id]


__all__ = ["compute_account_balance", "calculate_accounts", "select_accounts"]
