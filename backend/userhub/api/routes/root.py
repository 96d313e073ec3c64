"""Root Route — welcome payload confirming the server is running."""

from fastapi import APIRouter, Depends, status

from userhub.config import Settings, get_settings
from userhub.core.status import build_server_status
from userhub.schemas.status import ServerStatusResponse

router = APIRouter(tags=["root"])


@router.get(
    "/", response_model=ServerStatusResponse, status_code=status.HTTP_200_OK,
)
async def read_root(settings: Settings = Depends(get_settings)):
    return build_server_status(settings.welcome_message)
