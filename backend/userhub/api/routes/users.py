"""User Listing — serves the static user directory.

Invariants:
    - Read-only: no route here mutates the directory
    - Response always carries the full list (no pagination)
"""

import logging

from fastapi import APIRouter, status

from userhub.core import users as user_directory
from userhub.schemas.user import UserListResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "", response_model=UserListResponse, status_code=status.HTTP_200_OK,
)
async def list_users():
    users = user_directory.list_users()
    logger.debug(f"Listing {len(users)} users")
    return {"users": users}
