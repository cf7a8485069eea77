import httpx
import logging
import urllib.parse

from pydantic import (
    BaseModel,
    ValidationError
)
from typing import (
    Any,
    TypeVar
)

from call2fa.config.settings import (
    DEFAULT_BASE_URL,
    Settings
)
from call2fa.domain.exceptions import (
    AuthenticationError,
    SerializationError,
    TransportError,
    UnexpectedStatusError
)
from call2fa.domain.models.call import (
    AuthResponse,
    CallParams,
    CallResponse,
    CallStatus,
    DictateCodeCallParams,
    PoolCallParams,
    PoolCallResponse
)
from call2fa.domain.models.credentials import Credentials
from call2fa.domain.models.token import Token
from call2fa.infra.client.token_guard import (
    DEFAULT_MARGIN,
    TokenGuard
)

logger = logging.getLogger(__name__)

Model = TypeVar("Model", bound=BaseModel)


class Call2FAClient:
    def __init__(
        self,
        login: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 20,
        token_margin: float = DEFAULT_MARGIN,
        transport: httpx.BaseTransport | None = None,
    ):
        try:
            self.__credentials = Credentials(login=login, password=password)
        except ValidationError as e:
            raise SerializationError("Invalid Call2FA credentials", cause=e) from e

        self.__base_url = base_url.rstrip("/")
        self.__timeout = timeout
        self.__transport = transport
        self.guard = TokenGuard(self.authenticate, margin=token_margin)

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.BaseTransport | None = None) -> "Call2FAClient":
        return cls(
            login=settings.CALL2FA_LOGIN,
            password=settings.CALL2FA_PASSWORD,
            base_url=settings.CALL2FA_BASE_URL,
            timeout=settings.CALL2FA_TIMEOUT,
            token_margin=settings.CALL2FA_TOKEN_MARGIN,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self.__base_url

    @property
    def login(self) -> str:
        return self.__credentials.login

    @property
    def token(self) -> Token | None:
        return self.guard.token

    def authenticate(self) -> str:
        payload = {
            "login": self.__credentials.login,
            "password": self.__credentials.password.get_secret_value(),
        }

        r = self.__send("POST", "/v1/auth/", json_body=payload)

        if r.status_code != httpx.codes.OK:
            raise AuthenticationError(r.status_code, body=r.text)

        return self.__parse(r, AuthResponse).jwt

    def call(self, phone_number: str, callback_url: str = "") -> CallResponse:
        params = self.__params(CallParams, phone_number=phone_number, callback_url=callback_url)

        return self.__authorized(
            "POST", "/v1/call/", CallResponse, httpx.codes.CREATED, "call",
            json_body=params.model_dump(),
        )

    def pool_call(self, phone_number: str, pool_id: str | int) -> PoolCallResponse:
        params = self.__params(PoolCallParams, phone_number=phone_number)

        return self.__authorized(
            "POST", f"/v1/pool/{self.__segment(pool_id)}/call/", PoolCallResponse, httpx.codes.CREATED, "pool call",
            json_body=params.model_dump(),
        )

    def dictate_code_call(self, phone_number: str, code: str, lang: str) -> CallResponse:
        params = self.__params(DictateCodeCallParams, phone_number=phone_number, code=code, lang=lang)

        return self.__authorized(
            "POST", "/v1/code/call/", CallResponse, httpx.codes.CREATED, "code call",
            json_body=params.model_dump(),
        )

    def call_status(self, call_id: str | int) -> CallStatus:
        return self.__authorized("GET", f"/v1/call/{self.__segment(call_id)}/", CallStatus, httpx.codes.OK, "call status")

    def get_headers(self, jwt: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {jwt}",
            "Accept": "application/json",
        }

    def __authorized(
        self,
        method: str,
        path: str,
        model: type[Model],
        expected: int,
        step: str,
        json_body: dict[str, Any] | None = None,
    ) -> Model:
        token = self.guard.ensure_valid()

        r = self.__send(method, path, headers=self.get_headers(token.jwt), json_body=json_body)

        if r.status_code != expected:
            logger.warning("Call2FA %s returned %s", step, r.status_code)

            raise UnexpectedStatusError(r.status_code, step, body=r.text, context={"path": path})

        return self.__parse(r, model)

    def __send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self.__base_url}{path}"

        try:
            with httpx.Client(timeout=self.__timeout, transport=self.__transport) as c:
                return c.request(method, url, headers=headers, json=json_body)
        except httpx.HTTPError as e:
            logger.error("Call2FA request %s %s failed: %s", method, path, e)

            raise TransportError(f"Request {method} {path} failed", cause=e, context={"url": url}) from e

    @staticmethod
    def __segment(value: str | int) -> str:
        segment = str(value).strip()

        if segment in ("", ".", ".."):
            raise SerializationError(f"Invalid path identifier: {value!r}")

        return urllib.parse.quote(segment, safe="")

    @staticmethod
    def __params(model: type[Model], **values: Any) -> Model:
        try:
            return model(**values)
        except ValidationError as e:
            raise SerializationError(f"Invalid {model.__name__}", cause=e) from e

    @staticmethod
    def __parse(r: httpx.Response, model: type[Model]) -> Model:
        try:
            return model.model_validate(r.json())
        except ValueError as e:
            raise SerializationError(
                f"Unexpected {model.__name__} body",
                cause=e,
                context={"status_code": r.status_code, "body": r.text[:200]},
            ) from e
