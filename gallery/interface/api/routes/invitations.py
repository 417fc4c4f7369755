"""Artist invitation routes.

Admin routes issue, list and delete invitations. The public routes let an
invitee check a code and redeem it after signing in.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, EmailStr, Field

from gallery.application.usecase.invitation import (
    DeleteInvitationRequest,
    DeleteInvitationUseCase,
    GetInvitationStatsRequest,
    GetInvitationStatsResponse,
    GetInvitationStatsUseCase,
    IssueInvitationRequest,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    RedeemInvitationRequest,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from gallery.domain.service import IdentityService
from gallery.interface.api.auth import access_token

admin_router = APIRouter(
    prefix="/admin/invitations", tags=["invitations"], route_class=DishkaRoute
)
router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class IssueInvitationAPIRequest(BaseModel):
    """API request for inviting an artist."""

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    specialty: str | None = Field(default=None, max_length=100)
    message: str | None = Field(default=None, max_length=2000)
    pre_approved: bool = False


class RedeemInvitationAPIRequest(BaseModel):
    """API request for creating an artist profile from an invitation."""

    code: str = Field(min_length=1, max_length=50)
    bio: str = Field(min_length=10, max_length=2000)
    specialty: str = Field(min_length=2, max_length=100)
    exhibitions: str | None = Field(default=None, max_length=5000)
    profile_image: str | None = None


@admin_router.post(
    "", response_model=IssueInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def issue_invitation(
    request: IssueInvitationAPIRequest,
    response: Response,
    use_case: FromDishka[IssueInvitationUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> IssueInvitationResponse:
    """Issue an invitation and email the setup link.

    When the email fails the invitation is still stored; the response is
    502 with ``success: false`` and carries the code.
    """
    actor = await identity_service.get_current_user(token)
    result = await use_case.execute(
        IssueInvitationRequest(actor=actor, **request.model_dump())
    )
    if not result.success:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return result


@admin_router.get("/stats", response_model=GetInvitationStatsResponse)
async def get_invitation_stats(
    use_case: FromDishka[GetInvitationStatsUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> GetInvitationStatsResponse:
    """Invitation counts and the most recent invitations."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(GetInvitationStatsRequest(actor=actor))


@admin_router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invitation(
    invitation_id: int,
    use_case: FromDishka[DeleteInvitationUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> None:
    """Delete an invitation."""
    actor = await identity_service.get_current_user(token)
    await use_case.execute(
        DeleteInvitationRequest(actor=actor, invitation_id=invitation_id)
    )


@router.get("/validate", response_model=ValidateInvitationResponse)
async def validate_invitation(
    use_case: FromDishka[ValidateInvitationUseCase],
    code: str = Query(default=""),
) -> ValidateInvitationResponse:
    """Check an invitation code without consuming it.

    Always 200; ``valid`` and ``error`` carry the outcome.
    """
    return await use_case.execute(ValidateInvitationRequest(code=code))


@router.post(
    "/redeem", response_model=RedeemInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def redeem_invitation(
    request: RedeemInvitationAPIRequest,
    use_case: FromDishka[RedeemInvitationUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> RedeemInvitationResponse:
    """Create the caller's artist profile from an invitation."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        RedeemInvitationRequest(actor=actor, **request.model_dump())
    )
