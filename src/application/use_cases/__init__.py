"""Application use cases package."""

from .authorization import GetAuthorizationContextUseCase
from .find_member import FindMemberByNicknameUseCase
from .games import (
    GameListing,
    ListGamesUseCase,
    ScheduleGameUseCase,
    build_rsvp_url,
)
from .get_account_breakdown import GetAccountBreakdownUseCase, period_bounds
from .get_ledger_summary import GetLedgerSummaryUseCase
from .manage_accounts import ManageAccountsUseCase
from .manage_members import ManageMembersUseCase
from .manage_postings import DeletePostingUseCase, SavePostingUseCase
from .monthly_fees import (
    ConfirmFeePaymentUseCase,
    DeleteMonthlyFeeUseCase,
    GenerateFeesResult,
    GenerateMonthlyFeesUseCase,
    ListMonthlyFeesUseCase,
    UpdateMonthlyFeeUseCase,
)
from .rsvp_flow import RsvpConfirmationFlow, RsvpPhase, RsvpState
from .upload_member_photo import UploadMemberPhotoUseCase

__all__ = [
    "GetAuthorizationContextUseCase",
    "FindMemberByNicknameUseCase",
    "GameListing",
    "ListGamesUseCase",
    "ScheduleGameUseCase",
    "build_rsvp_url",
    "GetAccountBreakdownUseCase",
    "period_bounds",
    "GetLedgerSummaryUseCase",
    "ManageAccountsUseCase",
    "ManageMembersUseCase",
    "DeletePostingUseCase",
    "SavePostingUseCase",
    "ConfirmFeePaymentUseCase",
    "DeleteMonthlyFeeUseCase",
    "GenerateFeesResult",
    "GenerateMonthlyFeesUseCase",
    "ListMonthlyFeesUseCase",
    "UpdateMonthlyFeeUseCase",
    "RsvpConfirmationFlow",
    "RsvpPhase",
    "RsvpState",
    "UploadMemberPhotoUseCase",
]
