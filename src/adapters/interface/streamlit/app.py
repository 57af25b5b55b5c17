"""Streamlit club manager entry point."""

import atexit
import calendar
from collections.abc import Callable, Sequence
from datetime import date

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_donut_chart,
    format_currency,
    prepare_donut_data,
)
from src.adapters.interface.streamlit.rsvp_page import render_rsvp_page
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.members_repository import MembersRepositoryPort
from src.application.use_cases.authorization import (
    GetAuthorizationContextUseCase,
)
from src.application.use_cases.find_member import FindMemberByNicknameUseCase
from src.application.use_cases.games import (
    GameListing,
    ListGamesUseCase,
    ScheduleGameUseCase,
)
from src.application.use_cases.get_account_breakdown import (
    GetAccountBreakdownUseCase,
)
from src.application.use_cases.get_ledger_summary import (
    GetLedgerSummaryUseCase,
)
from src.application.use_cases.manage_accounts import ManageAccountsUseCase
from src.application.use_cases.manage_members import ManageMembersUseCase
from src.application.use_cases.manage_postings import (
    DeletePostingUseCase,
    SavePostingUseCase,
)
from src.application.use_cases.monthly_fees import (
    ConfirmFeePaymentUseCase,
    DeleteMonthlyFeeUseCase,
    GenerateMonthlyFeesUseCase,
    ListMonthlyFeesUseCase,
    UpdateMonthlyFeeUseCase,
)
from src.application.use_cases.rsvp_flow import RsvpConfirmationFlow
from src.application.use_cases.upload_member_photo import (
    ALLOWED_PHOTO_SUFFIXES,
    UploadMemberPhotoUseCase,
)
from src.domain.errors import ClubError
from src.domain.models.fees import MonthlyFee
from src.domain.models.ledger import (
    Account,
    AccountBreakdown,
    AccountGroup,
    LedgerFilter,
    LedgerView,
    Posting,
    PostingDraft,
)
from src.domain.models.members import (
    AuthorizationContext,
    Member,
    MemberCategory,
    MemberStatus,
)
from src.infrastructure.container import (
    build_blob_store,
    build_database_adapter,
    build_fees_repository,
    build_games_repository,
    build_ledger_repository,
    build_members_repository,
)
from src.infrastructure.session import StreamlitSessionAdapter
from src.infrastructure.settings import ClubSettings


AUTH_CONTEXT_KEY = "auth_context"
PAGES = (
    "Transactions",
    "Financial dashboard",
    "Monthly fees",
    "Accounts",
    "Games",
    "Members",
)


@st.cache_resource(show_spinner=False)
def _get_settings() -> ClubSettings:
    """Settings shared by every session."""
    return ClubSettings.from_env()


@st.cache_resource(show_spinner=False)
def _get_db_adapter() -> DatabaseEnginePort:
    """Database adapter shared by every session, disposed at exit."""
    adapter = build_database_adapter()
    atexit.register(adapter.dispose)
    return adapter


def _get_authorization_context() -> AuthorizationContext:
    """Return the session context, resolving it on first access only."""
    context = st.session_state.get(AUTH_CONTEXT_KEY)
    if context is None:
        settings = _get_settings()
        use_case = GetAuthorizationContextUseCase(
            session=StreamlitSessionAdapter(st, settings.dev_user_email),
            members_repository=build_members_repository(_get_db_adapter()),
        )
        context = use_case.execute()
        st.session_state[AUTH_CONTEXT_KEY] = context
    return context


def _fetch_accounts() -> list[Account]:
    """Fetch the chart of accounts."""
    ledger_repository = build_ledger_repository(_get_db_adapter())
    return ManageAccountsUseCase(ledger_repository).list_accounts()


@st.cache_data(show_spinner=False)
def _load_accounts() -> list[Account]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts()


def _fetch_ledger_view(
    ledger_filter: LedgerFilter,
    descending: bool,
) -> LedgerView:
    """Fetch the summary and postings of a reporting window."""
    ledger_repository = build_ledger_repository(_get_db_adapter())
    use_case = GetLedgerSummaryUseCase(ledger_repository)
    return use_case.execute(ledger_filter, descending=descending)


@st.cache_data(show_spinner=False)
def _load_ledger_view(
    ledger_filter: LedgerFilter,
    descending: bool = True,
) -> LedgerView:
    """Cached wrapper around _fetch_ledger_view."""
    return _fetch_ledger_view(ledger_filter, descending)


def _fetch_breakdown(year: int, month: int | None) -> AccountBreakdown:
    """Fetch per-account totals of a year or month."""
    ledger_repository = build_ledger_repository(_get_db_adapter())
    return GetAccountBreakdownUseCase(ledger_repository).execute(year, month)


@st.cache_data(show_spinner=False)
def _load_breakdown(year: int, month: int | None) -> AccountBreakdown:
    """Cached wrapper around _fetch_breakdown."""
    return _fetch_breakdown(year, month)


@st.cache_data(show_spinner=False)
def _load_available_years() -> list[int]:
    """Years with postings, most recent first."""
    ledger_repository = build_ledger_repository(_get_db_adapter())
    return GetAccountBreakdownUseCase(ledger_repository).available_years()


def _run_action(action: Callable[[], object], success_message: str) -> bool:
    """Run a write action and report the outcome inline.

    Returns:
        bool: True when the action succeeded.
    """
    try:
        action()
    except ClubError as exc:
        st.error(exc.message)
        return False
    st.cache_data.clear()
    st.success(success_message)
    return True


def _format_signed(posting: Posting, currency_code: str) -> str:
    """Format the posting value with its group sign."""
    return format_currency(posting.signed_value, currency_code)


def _posting_rows(
    postings: Sequence[Posting],
    accounts: Sequence[Account],
    currency_code: str,
) -> list[dict[str, str]]:
    """Build table rows for the transactions page."""
    description_by_id = {acc.id: acc.description for acc in accounts}
    return [
        {
            "Date": f"{posting.date:%d/%m/%Y}",
            "Account": description_by_id.get(
                posting.account_id,
                posting.account_id,
            ),
            "Description": posting.description or "",
            "Beneficiary": posting.beneficiary or "",
            "Value": _format_signed(posting, currency_code),
        }
        for posting in postings
    ]


def _posting_form(
    key: str,
    accounts: Sequence[Account],
    posting: Posting | None = None,
) -> PostingDraft | None:
    """Render a posting form and return the draft once submitted."""
    account_ids = [acc.id for acc in accounts]
    description_by_id = {acc.id: acc.description for acc in accounts}
    with st.form(key):
        account_id = st.selectbox(
            "Account",
            options=account_ids,
            index=(
                account_ids.index(posting.account_id)
                if posting and posting.account_id in account_ids
                else 0
            ),
            format_func=lambda acc_id: description_by_id.get(acc_id, acc_id),
        )
        posting_date = st.date_input(
            "Date",
            value=posting.date if posting else date.today(),
            format="DD/MM/YYYY",
        )
        value = st.text_input(
            "Value",
            value=f"{posting.value}" if posting else "",
            placeholder="0,00",
        )
        description = st.text_input(
            "Description",
            value=(posting.description or "") if posting else "",
        )
        beneficiary = st.text_input(
            "Beneficiary",
            value=(posting.beneficiary or "") if posting else "",
        )
        reference_month = st.date_input(
            "Reference month",
            value=posting.reference_month if posting else None,
            format="DD/MM/YYYY",
        )
        submitted = st.form_submit_button("Save")
    if not submitted:
        return None
    return PostingDraft(
        account_id=account_id or "",
        date=posting_date,
        value=value,
        description=description,
        beneficiary=beneficiary,
        reference_month=reference_month,
    )


def _render_transactions(
    context: AuthorizationContext,
    settings: ClubSettings,
) -> None:
    """Render the filtered ledger with its balances."""
    st.header("Transactions")
    accounts = _load_accounts()
    description_by_id = {acc.id: acc.description for acc in accounts}
    today = date.today()

    st.sidebar.subheader("Filters")
    start_date = st.sidebar.date_input(
        "Start date",
        value=date(today.year, today.month, 1),
        format="DD/MM/YYYY",
    )
    end_date = st.sidebar.date_input(
        "End date",
        value=None,
        format="DD/MM/YYYY",
    )
    account_id = st.sidebar.selectbox(
        "Account",
        options=[None] + [acc.id for acc in accounts],
        format_func=lambda acc_id: (
            "All" if acc_id is None else description_by_id[acc_id]
        ),
    )
    group = st.sidebar.selectbox(
        "Group",
        options=[None, AccountGroup.REVENUE, AccountGroup.EXPENSE],
        format_func=lambda item: "All" if item is None else item.value.title(),
    )
    beneficiaries = _load_ledger_view(
        LedgerFilter(start_date=None)
    ).beneficiaries
    beneficiary = st.sidebar.selectbox(
        "Beneficiary",
        options=[None] + beneficiaries,
        format_func=lambda item: "All" if item is None else item,
    )
    order = st.sidebar.radio("Order", ["Newest first", "Oldest first"])

    ledger_filter = LedgerFilter(
        start_date=start_date,
        end_date=end_date,
        account_id=account_id,
        group=group,
        beneficiary=beneficiary,
    )
    view = _load_ledger_view(
        ledger_filter,
        descending=order == "Newest first",
    )
    if view.summary is None:
        st.info("Choose a start date to see balances.")
        return

    currency = settings.currency_code
    opening_col, revenue_col, expense_col, closing_col = st.columns(4)
    opening_col.metric(
        "Opening balance",
        format_currency(view.summary.opening_balance, currency),
    )
    revenue_col.metric(
        "Revenue",
        format_currency(view.summary.total_revenue, currency),
    )
    expense_col.metric(
        "Expense",
        format_currency(view.summary.total_expense, currency),
    )
    closing_col.metric(
        "Closing balance",
        format_currency(view.summary.closing_balance, currency),
    )

    st.caption(f"{len(view.postings)} postings shown")
    st.dataframe(
        _posting_rows(view.postings, accounts, currency),
        width="stretch",
        hide_index=True,
    )

    if not context.is_admin:
        return
    if not accounts:
        st.warning("Create an account before recording postings.")
        return
    ledger_repository = build_ledger_repository(_get_db_adapter())
    with st.expander("New posting"):
        draft = _posting_form("new_posting", accounts)
        if draft is not None:
            _run_action(
                lambda: SavePostingUseCase(ledger_repository).execute(
                    context,
                    draft,
                ),
                "Posting recorded.",
            )
    if not view.postings:
        return
    with st.expander("Edit or delete a posting"):
        posting_by_id = {posting.id: posting for posting in view.postings}
        selected_id = st.selectbox(
            "Posting",
            options=list(posting_by_id),
            format_func=lambda posting_id: (
                f"{posting_by_id[posting_id].date:%d/%m/%Y} "
                f"{posting_by_id[posting_id].description or ''} "
                f"{_format_signed(posting_by_id[posting_id], currency)}"
            ),
        )
        selected = posting_by_id[selected_id]
        draft = _posting_form(f"edit_{selected.id}", accounts, selected)
        if draft is not None:
            _run_action(
                lambda: SavePostingUseCase(ledger_repository).execute(
                    context,
                    draft,
                    posting_id=selected.id,
                ),
                "Posting updated.",
            )
        if st.button("Delete posting", key=f"delete_{selected.id}"):
            _run_action(
                lambda: DeletePostingUseCase(ledger_repository).execute(
                    context,
                    selected.id,
                ),
                "Posting deleted.",
            )


def _render_breakdown_chart(
    title: str,
    breakdown_items,
    currency_code: str,
) -> None:
    """Render one donut chart of the financial dashboard."""
    st.subheader(title)
    data, _ = prepare_donut_data(breakdown_items, currency_code)
    if not data:
        st.info("No postings in this period.")
        return
    st.altair_chart(build_donut_chart(data), width="stretch")


def _render_dashboard(settings: ClubSettings) -> None:
    """Render revenue and expense per account for a year or month."""
    st.header("Financial dashboard")
    years = _load_available_years()
    if not years:
        st.info("No postings recorded yet.")
        return
    year = st.sidebar.selectbox("Year", years)
    month = st.sidebar.selectbox(
        "Month",
        options=[None] + list(range(1, 13)),
        format_func=lambda item: (
            "Whole year" if item is None else calendar.month_name[item]
        ),
    )
    breakdown = _load_breakdown(year, month)
    currency = settings.currency_code

    revenue_col, expense_col, result_col = st.columns(3)
    revenue_col.metric(
        "Revenue",
        format_currency(breakdown.total_revenue, currency),
    )
    expense_col.metric(
        "Expense",
        format_currency(breakdown.total_expense, currency),
    )
    result_col.metric("Result", format_currency(breakdown.result, currency))

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_breakdown_chart(
            "Revenue by account",
            breakdown.revenue_accounts,
            currency,
        )
    with chart_right:
        _render_breakdown_chart(
            "Expense by account",
            breakdown.expense_accounts,
            currency,
        )


def _fee_rows(
    fees: Sequence[MonthlyFee],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Member": fee.member_nickname or fee.member_id,
            "Month": f"{fee.reference_month:%m/%Y}",
            "Due": f"{fee.due_date:%d/%m/%Y}",
            "Value": format_currency(fee.value, currency_code),
            "Paid on": (
                f"{fee.payment_date:%d/%m/%Y}" if fee.payment_date else "-"
            ),
        }
        for fee in fees
    ]


def _fee_label(fee: MonthlyFee) -> str:
    member = fee.member_nickname or fee.member_id
    return f"{member} - {fee.reference_month:%m/%Y}"


def _render_monthly_fees(
    context: AuthorizationContext,
    settings: ClubSettings,
) -> None:
    """Render fees and, for admins, their maintenance forms."""
    st.header("Monthly fees")
    db_adapter = _get_db_adapter()
    fees_repository = build_fees_repository(db_adapter)
    fees = ListMonthlyFeesUseCase(fees_repository).execute()
    if fees:
        st.dataframe(
            _fee_rows(fees, settings.currency_code),
            width="stretch",
            hide_index=True,
        )
    else:
        st.info("No monthly fees generated yet.")

    if not context.is_admin:
        return
    ledger_repository = build_ledger_repository(db_adapter)
    members_repository = build_members_repository(db_adapter)

    with st.expander("Generate fees"):
        with st.form("generate_fees"):
            reference_month = st.date_input(
                "Reference month",
                format="DD/MM/YYYY",
            )
            due_date = st.date_input("Due date", format="DD/MM/YYYY")
            value = st.text_input("Value", placeholder="0,00")
            submitted = st.form_submit_button("Generate")
        if submitted:
            use_case = GenerateMonthlyFeesUseCase(
                fees_repository,
                members_repository,
            )
            _run_action(
                lambda: use_case.execute(
                    context,
                    reference_month,
                    due_date,
                    value,
                ),
                "Monthly fees generated.",
            )

    if not fees:
        return
    fee_by_id = {fee.id: fee for fee in fees}
    with st.expander("Manage a fee"):
        fee_id = st.selectbox(
            "Fee",
            options=list(fee_by_id),
            format_func=lambda item: _fee_label(fee_by_id[item]),
        )
        fee = fee_by_id[fee_id]
        if not fee.is_paid:
            payment_date = st.date_input(
                "Payment date",
                key=f"payment_{fee.id}",
                format="DD/MM/YYYY",
            )
            if st.button("Confirm payment", key=f"confirm_{fee.id}"):
                use_case = ConfirmFeePaymentUseCase(
                    fees_repository,
                    ledger_repository,
                    fee_account_keyword=settings.fee_account_keyword,
                )
                _run_action(
                    lambda: use_case.execute(context, fee.id, payment_date),
                    "Payment confirmed.",
                )
        with st.form(f"update_fee_{fee.id}"):
            due_date = st.date_input(
                "Due date",
                value=fee.due_date,
                format="DD/MM/YYYY",
            )
            value = st.text_input("Value", value=f"{fee.value}")
            submitted = st.form_submit_button("Update fee")
        if submitted:
            use_case = UpdateMonthlyFeeUseCase(
                fees_repository,
                ledger_repository,
            )
            _run_action(
                lambda: use_case.execute(context, fee.id, due_date, value),
                "Fee updated.",
            )
        if st.button("Delete fee", key=f"delete_fee_{fee.id}"):
            _run_action(
                lambda: DeleteMonthlyFeeUseCase(fees_repository).execute(
                    context,
                    fee.id,
                ),
                "Fee deleted.",
            )


def _render_accounts(context: AuthorizationContext) -> None:
    """Render the chart of accounts."""
    st.header("Accounts")
    accounts = _load_accounts()
    st.caption(f"{len(accounts)} accounts")
    st.dataframe(
        [
            {"Description": acc.description, "Group": acc.group.value.title()}
            for acc in accounts
        ],
        width="stretch",
        hide_index=True,
    )
    if not context.is_admin:
        return
    use_case = ManageAccountsUseCase(
        build_ledger_repository(_get_db_adapter())
    )
    groups = [AccountGroup.REVENUE, AccountGroup.EXPENSE]

    with st.expander("New account"):
        with st.form("new_account"):
            description = st.text_input("Description")
            group = st.selectbox(
                "Group",
                groups,
                format_func=lambda item: item.value.title(),
            )
            submitted = st.form_submit_button("Create")
        if submitted:
            _run_action(
                lambda: use_case.create(context, description, group),
                "Account created.",
            )

    if not accounts:
        return
    account_by_id = {acc.id: acc for acc in accounts}
    with st.expander("Edit or delete an account"):
        account_id = st.selectbox(
            "Account",
            options=list(account_by_id),
            format_func=lambda item: account_by_id[item].description,
        )
        account = account_by_id[account_id]
        with st.form(f"edit_account_{account.id}"):
            description = st.text_input(
                "Description",
                value=account.description,
            )
            group = st.selectbox(
                "Group",
                groups,
                index=groups.index(account.group),
                format_func=lambda item: item.value.title(),
            )
            submitted = st.form_submit_button("Update")
        if submitted:
            _run_action(
                lambda: use_case.update(
                    context,
                    account.id,
                    description,
                    group,
                ),
                "Account updated.",
            )
        if st.button("Delete account", key=f"delete_account_{account.id}"):
            _run_action(
                lambda: use_case.delete(context, account.id),
                "Account deleted.",
            )


def _game_rows(listings: Sequence[GameListing]) -> list[dict[str, str | int]]:
    return [
        {
            "Date": f"{listing.game.date:%d/%m/%Y}",
            "Time": (
                f"{listing.game.time:%H:%M}" if listing.game.time else "-"
            ),
            "Location": listing.game.location,
            "Status": listing.game.status.value.title(),
            "Confirmed": listing.confirmed_count,
            "RSVP link": listing.rsvp_url,
        }
        for listing in listings
    ]


def _render_games(
    context: AuthorizationContext,
    settings: ClubSettings,
) -> None:
    """Render games with their RSVP links."""
    st.header("Games")
    games_repository = build_games_repository(_get_db_adapter())
    listings = ListGamesUseCase(
        games_repository,
        settings.public_base_url,
    ).execute()
    if listings:
        st.dataframe(
            _game_rows(listings),
            width="stretch",
            hide_index=True,
            column_config={"RSVP link": st.column_config.LinkColumn()},
        )
    else:
        st.info("No games scheduled yet.")

    if not context.is_admin:
        return
    with st.expander("Schedule a game"):
        with st.form("schedule_game"):
            game_date = st.date_input("Date", format="DD/MM/YYYY")
            game_time = st.time_input("Time", value=None)
            location = st.text_input("Location")
            submitted = st.form_submit_button("Schedule")
        if submitted:
            _run_action(
                lambda: ScheduleGameUseCase(games_repository).execute(
                    context,
                    game_date,
                    game_time,
                    location,
                ),
                "Game scheduled.",
            )


def _render_member_card(member: Member) -> None:
    if member.photo_url:
        st.image(member.photo_url, width=160)
    st.markdown(f"**{member.nickname}** ({member.name})")
    st.caption(
        f"{member.status.value.title()} - "
        f"{member.category.value.replace('_', ' ').title()}"
    )


def _render_members(context: AuthorizationContext) -> None:
    """Render the nickname search and the photo upload."""
    st.header("Members")
    db_adapter = _get_db_adapter()
    members_repository = build_members_repository(db_adapter)

    nickname = st.text_input("Find a member by nickname")
    if nickname.strip():
        member = FindMemberByNicknameUseCase(members_repository).execute(
            nickname
        )
        if member is None:
            st.warning("No member uses this nickname.")
        else:
            _render_member_card(member)

    if not context.is_authenticated:
        return
    if context.is_admin:
        members = members_repository.fetch_members()
        _render_member_registry(context, members_repository, members)
        if not members:
            return
        member_by_id = {member.id: member for member in members}
        member_id = st.selectbox(
            "Member",
            options=list(member_by_id),
            index=(
                list(member_by_id).index(context.member_id)
                if context.member_id in member_by_id
                else 0
            ),
            format_func=lambda item: member_by_id[item].nickname,
        )
    else:
        member_id = context.member_id
    if member_id is None:
        return

    uploaded = st.file_uploader(
        "Photo",
        type=[suffix.lstrip(".") for suffix in ALLOWED_PHOTO_SUFFIXES],
    )
    if uploaded is not None and st.button("Upload photo"):
        use_case = UploadMemberPhotoUseCase(
            members_repository,
            build_blob_store(_get_settings()),
        )
        _run_action(
            lambda: use_case.execute(
                context,
                member_id,
                uploaded.name,
                uploaded.getvalue(),
            ),
            "Photo updated.",
        )


def _member_form_fields(
    key: str,
    member: Member | None = None,
) -> tuple[str, str, MemberCategory, MemberStatus, bool, str]:
    categories = list(MemberCategory)
    statuses = list(MemberStatus)
    name = st.text_input(
        "Name",
        value=member.name if member else "",
        key=f"{key}_name",
    )
    nickname = st.text_input(
        "Nickname",
        value=member.nickname if member else "",
        key=f"{key}_nickname",
    )
    category = st.selectbox(
        "Category",
        categories,
        index=categories.index(member.category) if member else 0,
        format_func=lambda item: item.value.replace("_", " ").title(),
        key=f"{key}_category",
    )
    status = st.selectbox(
        "Status",
        statuses,
        index=statuses.index(member.status) if member else 0,
        format_func=lambda item: item.value.title(),
        key=f"{key}_status",
    )
    is_admin = st.checkbox(
        "Admin",
        value=member.is_admin if member else False,
        key=f"{key}_admin",
    )
    user_email = st.text_input(
        "Sign-in e-mail",
        value=(member.user_email or "") if member else "",
        key=f"{key}_email",
    )
    return name, nickname, category, status, is_admin, user_email


def _render_member_registry(
    context: AuthorizationContext,
    members_repository: MembersRepositoryPort,
    members: Sequence[Member],
) -> None:
    """Render the admin forms to register and edit members."""
    use_case = ManageMembersUseCase(members_repository)

    with st.expander("New member"):
        with st.form("new_member"):
            fields = _member_form_fields("new_member")
            submitted = st.form_submit_button("Register")
        if submitted:
            _run_action(
                lambda: use_case.create(context, *fields),
                "Member registered.",
            )

    if not members:
        return
    member_by_id = {member.id: member for member in members}
    with st.expander("Edit a member"):
        member_id = st.selectbox(
            "Member to edit",
            options=list(member_by_id),
            format_func=lambda item: member_by_id[item].nickname,
        )
        member = member_by_id[member_id]
        with st.form(f"edit_member_{member.id}"):
            fields = _member_form_fields(f"edit_member_{member.id}", member)
            submitted = st.form_submit_button("Update")
        if submitted:
            _run_action(
                lambda: use_case.update(context, member.id, *fields),
                "Member updated.",
            )


def _build_rsvp_flow(game_id: str) -> RsvpConfirmationFlow:
    """Create the RSVP flow of a game with the shared adapter."""
    db_adapter = _get_db_adapter()
    return RsvpConfirmationFlow(
        game_id,
        games_repository=build_games_repository(db_adapter),
        members_repository=build_members_repository(db_adapter),
    )


def _render_session_sidebar(
    context: AuthorizationContext,
    settings: ClubSettings,
) -> None:
    """Show who is signed in, with sign-in and sign-out buttons."""
    if context.is_authenticated:
        role = "admin" if context.is_admin else "member"
        st.sidebar.caption(f"Signed in as {context.nickname} ({role})")
        if settings.dev_user_email is None and st.sidebar.button("Sign out"):
            st.session_state.pop(AUTH_CONTEXT_KEY, None)
            st.logout()
        return
    st.sidebar.caption("Browsing as a visitor")
    if settings.dev_user_email is None and st.sidebar.button("Sign in"):
        st.session_state.pop(AUTH_CONTEXT_KEY, None)
        st.login()


def _render_page(settings: ClubSettings) -> None:
    context = _get_authorization_context()
    _render_session_sidebar(context, settings)
    page = st.sidebar.selectbox("Page", PAGES)

    if page == "Transactions":
        _render_transactions(context, settings)
    elif page == "Financial dashboard":
        _render_dashboard(settings)
    elif page == "Monthly fees":
        _render_monthly_fees(context, settings)
    elif page == "Accounts":
        _render_accounts(context)
    elif page == "Games":
        _render_games(context, settings)
    else:
        _render_members(context)


def _route(settings: ClubSettings) -> None:
    game_id = st.query_params.get("game")
    if game_id is not None:
        render_rsvp_page(
            game_id,
            _build_rsvp_flow,
            settings.rsvp_redirect_seconds,
        )
        return

    st.title("Club Manager")
    _render_page(settings)


def main() -> None:
    """Render the Streamlit app.

    Storage and domain failures that escape a page are shown as an error
    message instead of a stack trace.
    """
    st.set_page_config(page_title="Club Manager", layout="wide")
    settings = _get_settings()
    try:
        _route(settings)
    except ClubError as exc:
        st.error(exc.message)


if __name__ == "__main__":  # pragma: no cover
    main()
