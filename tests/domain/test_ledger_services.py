"""Tests for the ledger summary engine."""

from datetime import date
from decimal import Decimal

from src.domain.models.ledger import (
    Account,
    AccountGroup,
    LedgerFilter,
    Posting,
)
from src.domain.services.ledger import (
    compute_account_breakdown,
    compute_opening_balance,
    compute_summary,
    list_beneficiaries,
    matches_filter,
    select_window,
)


def _posting(
    posting_id: str,
    when: date,
    group: AccountGroup,
    value: str,
    account_id: str = "acc-1",
    beneficiary: str | None = None,
) -> Posting:
    return Posting(
        id=posting_id,
        account_id=account_id,
        date=when,
        value=Decimal(value),
        account_group=group,
        beneficiary=beneficiary,
    )


def _sample_postings() -> list[Posting]:
    return [
        _posting("p1", date(2024, 1, 5), AccountGroup.REVENUE, "50.00"),
        _posting("p2", date(2024, 1, 10), AccountGroup.EXPENSE, "20.00"),
        _posting("p3", date(2024, 1, 15), AccountGroup.REVENUE, "30.00"),
    ]


def test_compute_summary_worked_example():
    """Opening 150, revenue 30, expense 20, closing 160."""
    summary = compute_summary(
        _sample_postings(),
        Decimal("100.00"),
        LedgerFilter(
            start_date=date(2024, 1, 10),
            end_date=date(2024, 1, 31),
        ),
    )

    assert summary.opening_balance == Decimal("150.00")
    assert summary.total_revenue == Decimal("30.00")
    assert summary.total_expense == Decimal("20.00")
    assert summary.closing_balance == Decimal("160.00")


def test_compute_summary_returns_none_without_start_date():
    summary = compute_summary(
        _sample_postings(),
        Decimal("100"),
        LedgerFilter(start_date=None, end_date=date(2024, 1, 31)),
    )

    assert summary is None


def test_balance_identity_holds_for_every_filter():
    postings = _sample_postings() + [
        _posting(
            "p4",
            date(2024, 2, 1),
            AccountGroup.EXPENSE,
            "12.34",
            account_id="acc-2",
            beneficiary="Ze",
        ),
    ]
    filters = [
        LedgerFilter(start_date=date(2023, 12, 1)),
        LedgerFilter(start_date=date(2024, 1, 6), end_date=date(2024, 1, 14)),
        LedgerFilter(start_date=date(2024, 1, 1), account_id="acc-2"),
        LedgerFilter(start_date=date(2024, 1, 1), group=AccountGroup.REVENUE),
        LedgerFilter(start_date=date(2024, 1, 1), beneficiary="Ze"),
        LedgerFilter(start_date=date(2025, 1, 1)),
    ]

    for ledger_filter in filters:
        summary = compute_summary(postings, Decimal("7.5"), ledger_filter)
        assert summary.closing_balance == (
            summary.opening_balance
            + summary.total_revenue
            - summary.total_expense
        )


def test_moving_start_absorbs_prior_posting_into_opening():
    """Including one more prior posting shifts it into the opening."""
    postings = _sample_postings()
    earlier = compute_summary(
        postings,
        Decimal("100"),
        LedgerFilter(start_date=date(2024, 1, 10), end_date=date(2024, 1, 31)),
    )
    later = compute_summary(
        postings,
        Decimal("100"),
        LedgerFilter(start_date=date(2024, 1, 11), end_date=date(2024, 1, 31)),
    )

    absorbed = postings[1]
    assert later.opening_balance == (
        earlier.opening_balance + absorbed.signed_value
    )
    assert later.total_revenue == earlier.total_revenue
    assert later.total_expense == earlier.total_expense - absorbed.value


def test_same_filter_twice_gives_identical_summary():
    postings = _sample_postings()
    ledger_filter = LedgerFilter(
        start_date=date(2024, 1, 1),
        group=AccountGroup.REVENUE,
    )

    first = compute_summary(postings, Decimal("100"), ledger_filter)
    second = compute_summary(postings, Decimal("100"), ledger_filter)

    assert first == second


def test_opening_balance_ignores_account_filters():
    """Only the start date decides what goes into the opening balance."""
    postings = _sample_postings()
    summary = compute_summary(
        postings,
        Decimal("0"),
        LedgerFilter(start_date=date(2024, 1, 10), account_id="other"),
    )

    assert summary.opening_balance == Decimal("50.00")
    assert summary.total_revenue == Decimal("0")
    assert summary.total_expense == Decimal("0")


def test_compute_opening_balance_uses_strictly_earlier_postings():
    opening = compute_opening_balance(
        _sample_postings(),
        Decimal("10"),
        date(2024, 1, 5),
    )

    assert opening == Decimal("10")


def test_window_bounds_are_inclusive():
    postings = _sample_postings()
    ledger_filter = LedgerFilter(
        start_date=date(2024, 1, 5),
        end_date=date(2024, 1, 15),
    )

    assert all(matches_filter(p, ledger_filter) for p in postings)


def test_beneficiary_filter_never_matches_blank_beneficiary():
    posting = _posting("p1", date(2024, 1, 5), AccountGroup.REVENUE, "1")
    named = _posting(
        "p2",
        date(2024, 1, 5),
        AccountGroup.REVENUE,
        "1",
        beneficiary="Ana",
    )
    ledger_filter = LedgerFilter(start_date=date(2024, 1, 1), beneficiary="Ana")

    assert matches_filter(posting, ledger_filter) is False
    assert matches_filter(named, ledger_filter) is True


def test_select_window_sorts_and_requires_start_date():
    postings = _sample_postings()

    newest_first = select_window(
        postings,
        LedgerFilter(start_date=date(2024, 1, 1)),
    )
    oldest_first = select_window(
        postings,
        LedgerFilter(start_date=date(2024, 1, 1)),
        descending=False,
    )

    assert [p.id for p in newest_first] == ["p3", "p2", "p1"]
    assert [p.id for p in oldest_first] == ["p1", "p2", "p3"]
    assert select_window(postings, LedgerFilter(start_date=None)) == []


def test_list_beneficiaries_skips_blank_values():
    day = date(2024, 1, 1)
    postings = [
        _posting("a", day, AccountGroup.REVENUE, "1", beneficiary="Zé"),
        _posting("b", day, AccountGroup.REVENUE, "1", beneficiary="Ana"),
        _posting("c", day, AccountGroup.REVENUE, "1", beneficiary="Ana"),
        _posting("d", day, AccountGroup.REVENUE, "1"),
    ]

    assert list_beneficiaries(postings) == ["Ana", "Zé"]


def test_compute_account_breakdown_groups_and_sorts_totals():
    accounts = [
        Account("fees", "Monthly fees", AccountGroup.REVENUE),
        Account("bar", "Bar", AccountGroup.REVENUE),
        Account("field", "Field rent", AccountGroup.EXPENSE),
    ]
    postings = [
        _posting("1", date(2024, 3, 1), AccountGroup.REVENUE, "40", "fees"),
        _posting("2", date(2024, 3, 9), AccountGroup.REVENUE, "40", "fees"),
        _posting("3", date(2024, 3, 9), AccountGroup.REVENUE, "25", "bar"),
        _posting("4", date(2024, 3, 31), AccountGroup.EXPENSE, "60", "field"),
        _posting("5", date(2024, 4, 1), AccountGroup.EXPENSE, "99", "field"),
    ]

    breakdown = compute_account_breakdown(
        postings,
        accounts,
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    assert [item.description for item in breakdown.revenue_accounts] == [
        "Monthly fees",
        "Bar",
    ]
    assert breakdown.revenue_accounts[0].total == Decimal("80")
    assert breakdown.total_revenue == Decimal("105")
    assert breakdown.total_expense == Decimal("60")
    assert breakdown.result == Decimal("45")
