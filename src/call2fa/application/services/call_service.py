from call2fa.domain.exceptions import Call2FAError
from call2fa.domain.models.call import (
    CallParams,
    CallResponse,
    CallStatus,
    DictateCodeCallParams,
    PoolCallParams,
    PoolCallResponse
)
from call2fa.infra.client.call2fa_client import Call2FAClient
from call2fa.utils.http_errors import to_http_exception


class CallService:
    def __init__(self, client: Call2FAClient):
        self.__client = client

    def start_call(self, params: CallParams) -> CallResponse:
        try:
            return self.__client.call(params.phone_number, params.callback_url)
        except Call2FAError as e:
            raise to_http_exception(e) from e

    def start_pool_call(self, pool_id: str, params: PoolCallParams) -> PoolCallResponse:
        try:
            return self.__client.pool_call(params.phone_number, pool_id)
        except Call2FAError as e:
            raise to_http_exception(e) from e

    def start_code_call(self, params: DictateCodeCallParams) -> CallResponse:
        try:
            return self.__client.dictate_code_call(params.phone_number, params.code, params.lang)
        except Call2FAError as e:
            raise to_http_exception(e) from e

    def get_status(self, call_id: str) -> CallStatus:
        try:
            return self.__client.call_status(call_id)
        except Call2FAError as e:
            raise to_http_exception(e) from e
