"""Roster use cases."""

from .accept_join_request import AcceptJoinRequestRequest, AcceptJoinRequestUseCase
from .leave_game import LeaveGameRequest, LeaveGameUseCase
from .list_pending_requests import (
    ListPendingRequestsRequest,
    ListPendingRequestsUseCase,
)
from .reject_join_request import (
    RejectJoinRequestRequest,
    RejectJoinRequestResponse,
    RejectJoinRequestUseCase,
)
from .remove_participant import RemoveParticipantRequest, RemoveParticipantUseCase
from .request_join import RequestJoinRequest, RequestJoinResponse, RequestJoinUseCase

__all__ = [
    "AcceptJoinRequestRequest",
    "AcceptJoinRequestUseCase",
    "LeaveGameRequest",
    "LeaveGameUseCase",
    "ListPendingRequestsRequest",
    "ListPendingRequestsUseCase",
    "RejectJoinRequestRequest",
    "RejectJoinRequestResponse",
    "RejectJoinRequestUseCase",
    "RemoveParticipantRequest",
    "RemoveParticipantUseCase",
    "RequestJoinRequest",
    "RequestJoinResponse",
    "RequestJoinUseCase",
]
