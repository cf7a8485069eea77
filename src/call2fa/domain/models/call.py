from datetime import (
    datetime,
    timezone
)
from pydantic import (
    BaseModel,
    ConfigDict,
    StringConstraints
)
from typing import Annotated

PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CallParams(BaseModel):
    phone_number: PhoneNumber
    callback_url: str = ""


class PoolCallParams(BaseModel):
    phone_number: PhoneNumber


class DictateCodeCallParams(BaseModel):
    phone_number: PhoneNumber
    code        : Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    lang        : Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=5)]


class AuthResponse(BaseModel):
    jwt: Annotated[str, StringConstraints(min_length=1)]


class CallResponse(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    call_id: Annotated[str, StringConstraints(min_length=1)]


class PoolCallResponse(CallResponse):
    number: str
    code  : str


class CallStatus(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id              : int
    state           : str
    phone_number    : str        = ""
    callback_url    : str | None = None
    ivr_answer      : str | None = None
    is_called       : bool       = False
    is_callback_sent: bool       = False
    is_error        : bool       = False
    error_info      : str | None = None
    created_at      : str | None = None
    created_at_unix : int | None = None
    finished_at     : str | None = None
    finished_at_unix: int | None = None
    called_at       : str | None = None
    called_at_unix  : int | None = None
    answer_at       : str | None = None
    answer_at_unix  : int | None = None
    region_code     : str | None = None
    phone_number_raw: str | None = None

    @property
    def created(self) -> datetime | None:
        return _from_unix(self.created_at_unix)

    @property
    def finished(self) -> datetime | None:
        return _from_unix(self.finished_at_unix)


def _from_unix(value: int | None) -> datetime | None:
    if not value:
        return None

    return datetime.fromtimestamp(value, tz=timezone.utc)
