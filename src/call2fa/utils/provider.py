from functools import lru_cache

from call2fa.application.services.auth_service import AuthService
from call2fa.application.services.call_service import CallService
from call2fa.config.settings import Settings
from call2fa.infra.client.call2fa_client import Call2FAClient


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_client() -> Call2FAClient:
    return Call2FAClient.from_settings(get_settings())


def get_auth_service() -> AuthService:
    return AuthService(get_client())


def get_call_service() -> CallService:
    return CallService(get_client())
