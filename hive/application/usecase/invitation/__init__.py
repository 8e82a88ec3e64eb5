"""Invitation use cases."""

from .create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from .delete_invitation import DeleteInvitationRequest, DeleteInvitationUseCase
from .list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from .use_invitation import (
    UseInvitationRequest,
    UseInvitationResponse,
    UseInvitationUseCase,
)
from .validate_invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)

__all__ = [
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "DeleteInvitationRequest",
    "DeleteInvitationUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "UseInvitationRequest",
    "UseInvitationResponse",
    "UseInvitationUseCase",
    "ValidateInvitationRequest",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
]
