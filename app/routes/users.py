"""
User routes
Forward /api/users requests to the data service and wrap the outcome in an envelope
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
import structlog

from app.models.envelope import Envelope
from app.models.upstream import UpstreamOk, UpstreamResult
from app.services.profile_service import ProfileError, build_profile
from app.utils.data_service_client import DataServiceClient

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_data_service(request: Request) -> DataServiceClient:
    """Dependency to get the shared data service client"""
    return request.app.state.data_service


def failure_response(status_code: int, message: str, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Envelope(success=False, message=message, error=error).to_content(),
    )


def forwarded_body(payload: Any) -> Any:
    """JSON bodies pass through unchanged; missing or non-JSON bodies become {}"""
    if payload is None or isinstance(payload, (bytes, bytearray)):
        return {}
    return payload


def to_response(
    result: UpstreamResult,
    success_message: str,
    failure_message: str,
    status_code: int = 200,
    include_data: bool = True,
) -> JSONResponse:
    """Map an upstream result onto the gateway envelope"""
    if isinstance(result, UpstreamOk):
        if include_data:
            envelope = Envelope(success=True, data=result.data, message=success_message)
        else:
            envelope = Envelope(success=True, message=success_message)
        return JSONResponse(status_code=status_code, content=envelope.to_content())

    # UpstreamHTTPError keeps the upstream status, UpstreamTransportError is always 500
    return failure_response(result.status_code, failure_message, result.detail)


@router.get("")
async def list_users(data_service: DataServiceClient = Depends(get_data_service)):
    """Get all users from the data service"""
    result = await data_service.list_users()
    return to_response(
        result,
        "Users retrieved from data service",
        "Failed to fetch users from data service",
    )


@router.get("/{user_id}")
async def get_user(user_id: str, data_service: DataServiceClient = Depends(get_data_service)):
    """Get a user by ID from the data service"""
    result = await data_service.get_user(user_id)
    return to_response(
        result,
        "User retrieved from data service",
        "Failed to fetch user from data service",
    )


@router.post("")
async def create_user(
    payload: Any = Body(None),
    data_service: DataServiceClient = Depends(get_data_service),
):
    """Create a user via the data service, forwarding the body unchanged"""
    result = await data_service.create_user(forwarded_body(payload))
    return to_response(
        result,
        "User created via data service",
        "Failed to create user via data service",
        status_code=201,
    )


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    data_service: DataServiceClient = Depends(get_data_service),
):
    """Update a user via the data service, forwarding the body unchanged"""
    result = await data_service.update_user(user_id, forwarded_body(payload))
    return to_response(
        result,
        "User updated via data service",
        "Failed to update user via data service",
    )


@router.delete("/{user_id}")
async def delete_user(user_id: str, data_service: DataServiceClient = Depends(get_data_service)):
    """Delete a user via the data service"""
    result = await data_service.delete_user(user_id)
    return to_response(
        result,
        "User deleted via data service",
        "Failed to delete user via data service",
        include_data=False,
    )


@router.get("/{user_id}/profile")
async def get_user_profile(user_id: str, data_service: DataServiceClient = Depends(get_data_service)):
    """Get a user with gateway-level enrichment"""
    failure_message = "Failed to generate user profile"
    result = await data_service.get_user(user_id)
    if not isinstance(result, UpstreamOk):
        return to_response(result, "", failure_message)

    try:
        profile = build_profile(result.data, user_id=user_id)
    except ProfileError as e:
        logger.error("Error generating profile", user_id=user_id, error=str(e))
        return failure_response(500, failure_message, str(e))

    return JSONResponse(
        status_code=200,
        content=Envelope(success=True, data=profile, message="Enhanced profile generated").to_content(),
    )
