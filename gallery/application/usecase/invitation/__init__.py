"""Invitation use cases."""

from gallery.application.usecase.invitation.delete_invitation import (
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
)
from gallery.application.usecase.invitation.get_invitation_stats import (
    GetInvitationStatsRequest,
    GetInvitationStatsResponse,
    GetInvitationStatsUseCase,
    InvitationSummary,
)
from gallery.application.usecase.invitation.issue_invitation import (
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
)
from gallery.application.usecase.invitation.redeem_invitation import (
    RedeemInvitationRequest,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from gallery.application.usecase.invitation.validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "DeleteInvitationRequest",
    "DeleteInvitationUseCase",
    "GetInvitationStatsRequest",
    "GetInvitationStatsResponse",
    "GetInvitationStatsUseCase",
    "InvitationSummary",
    "IssueInvitationRequest",
    "IssueInvitationResponse",
    "IssueInvitationUseCase",
    "RedeemInvitationRequest",
    "RedeemInvitationResponse",
    "RedeemInvitationUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
