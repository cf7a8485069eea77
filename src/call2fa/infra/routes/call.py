from fastapi import (
    APIRouter,
    Depends
)

from call2fa.application.services.call_service import CallService
from call2fa.domain.models.call import (
    CallParams,
    CallResponse,
    CallStatus,
    DictateCodeCallParams,
    PoolCallParams,
    PoolCallResponse
)
from call2fa.utils.provider import get_call_service

router = APIRouter(prefix="/calls", tags=["calls"])


@router.post("", status_code=201, response_model=CallResponse)
def call(params: CallParams, service: CallService = Depends(get_call_service)):
    return service.start_call(params)


@router.post("/pool/{pool_id}", status_code=201, response_model=PoolCallResponse)
def pool_call(pool_id: str, params: PoolCallParams, service: CallService = Depends(get_call_service)):
    return service.start_pool_call(pool_id, params)


@router.post("/code", status_code=201, response_model=CallResponse)
def code_call(params: DictateCodeCallParams, service: CallService = Depends(get_call_service)):
    return service.start_code_call(params)


@router.get("/{call_id}", response_model=CallStatus)
def call_status(call_id: str, service: CallService = Depends(get_call_service)):
    return service.get_status(call_id)
