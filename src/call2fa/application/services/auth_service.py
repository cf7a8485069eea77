from call2fa.domain.exceptions import Call2FAError
from call2fa.infra.client.call2fa_client import Call2FAClient
from call2fa.utils.http_errors import to_http_exception


class AuthService:
    def __init__(self, client: Call2FAClient):
        self.__client = client

    def status(self) -> dict:
        token = self.__client.token

        return {
            "logged_in": token is not None,
            "login": self.__client.login,
            "expires_at": token.expires_at if token else None,
        }

    def refresh(self) -> dict:
        try:
            token = self.__client.guard.renew()
        except Call2FAError as e:
            raise to_http_exception(e) from e

        return {"message": "Call2FA token renewed", "expires_at": token.expires_at}
