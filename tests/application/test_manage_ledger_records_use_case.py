"""Tests for the ManageLedgerRecordsUseCase."""

from unittest.mock import MagicMock, call

import pytest

from src.application.use_cases.manage_ledger_records import (
    ManageLedgerRecordsUseCase,
)


def test_create_returns_stored_row() -> None:
    """create should forward values and return the inserted row."""
    repo = MagicMock()
    repo.insert_record.return_value = {"id": "new", "name": "Cash"}
    logger = MagicMock()

    row = ManageLedgerRecordsUseCase(repo, logger=logger).create(
        "accounts",
        {"name": "Cash"},
    )

    assert row == {"id": "new", "name": "Cash"}
    repo.insert_record.assert_called_once_with("accounts", {"name": "Cash"})
    logger.info.assert_called_once()


def test_update_and_delete_delegate_to_repository() -> None:
    """update and delete are single repository calls."""
    repo = MagicMock()
    use_case = ManageLedgerRecordsUseCase(repo, logger=MagicMock())

    use_case.update("transactions", "t1", {"status": "APPROVED"})
    use_case.delete("projects", "p1")

    repo.update_record.assert_called_once_with(
        "transactions",
        "t1",
        {"status": "APPROVED"},
    )
    repo.delete_record.assert_called_once_with("projects", "p1")


def test_swap_sort_order_issues_two_updates() -> None:
    """Swapping exchanges the orders through two sequential updates."""
    repo = MagicMock()

    ManageLedgerRecordsUseCase(repo, logger=MagicMock()).swap_sort_order(
        "categories",
        ("a", 1),
        ("b", 2),
    )

    assert repo.update_record.call_args_list == [
        call("categories", "a", {"sort_order": 2}),
        call("categories", "b", {"sort_order": 1}),
    ]


def test_swap_does_not_roll_back_first_update() -> None:
    """A failing second update leaves the first one applied."""
    repo = MagicMock()
    repo.update_record.side_effect = [None, RuntimeError("boom")]

    with pytest.raises(RuntimeError):
        ManageLedgerRecordsUseCase(repo, logger=MagicMock()).swap_sort_order(
            "accounts",
            ("a", 1),
            ("b", 2),
        )

    assert repo.update_record.call_count == 2


def test_unknown_collection_is_rejected() -> None:
    """Collections outside the ledger are refused before any IO."""
    repo = MagicMock()

    with pytest.raises(ValueError):
        ManageLedgerRecordsUseCase(repo, logger=MagicMock()).delete(
            "users",
            "u1",
        )

    repo.delete_record.assert_not_called()
