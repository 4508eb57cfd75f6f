"""User API routes.

Maps requests on ``/users`` onto the user service, and service outcomes
onto status codes. Payloads are validated by the ``User`` model before
the service is called; a failed validation is answered with 400 by the
application's validation handler.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from users_api.services import get_user_service
from users_common.models.user import User
from users_common.services.exceptions import UserNotFoundError
from users_common.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid user payload"}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Not found - User not found"}}


def _not_found(error: UserNotFoundError) -> HTTPException:
    logger.warning("User %s not found", error.user_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=UserNotFoundError.message)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Add User Details",
    responses=_BAD_REQUEST,
)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def add_user(user: User, response: Response, service: UserService = Depends(get_user_service)) -> User:
    """Adds the user and returns it with the id assigned by the service.

    Any id in the payload is ignored.
    """
    created = service.add_user(user.model_copy(update={"id": None}))
    response.headers["Location"] = f"/users/{created.id}"
    return created


@router.get(
    "",
    response_model=list[User],
    summary="Get All User Details",
    responses={status.HTTP_204_NO_CONTENT: {"description": "No User Content found"}},
)
@router.get("/", response_model=list[User], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> list[User] | Response:
    """Returns all users, or 204 when there are none."""
    users = service.list_users()
    if not users:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return users


@router.get("/{user_id}", response_model=User, summary="Get user details by id", responses=_NOT_FOUND)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    try:
        return service.get_user(user_id)
    except UserNotFoundError as e:
        raise _not_found(e) from e


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Update User By Id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_user(user_id: int, user: User, service: UserService = Depends(get_user_service)) -> User:
    """Updates the user stored under ``user_id``.

    The path id replaces any id in the payload.
    """
    try:
        return service.update_user(user.model_copy(update={"id": user_id}))
    except UserNotFoundError as e:
        raise _not_found(e) from e


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User By Id",
    responses=_NOT_FOUND,
)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    try:
        service.delete_user(user_id)
    except UserNotFoundError as e:
        raise _not_found(e) from e
    return None
