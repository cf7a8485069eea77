from fastapi import (
    APIRouter,
    Depends
)

from call2fa.application.services.auth_service import AuthService
from call2fa.utils.provider import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status")
def auth_status(service: AuthService = Depends(get_auth_service)):
    return service.status()


@router.post("/refresh")
def refresh(service: AuthService = Depends(get_auth_service)):
    return service.refresh()
