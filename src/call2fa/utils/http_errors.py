from fastapi import HTTPException

from call2fa.domain.exceptions import (
    Call2FAError,
    TransportError,
    UnexpectedStatusError
)


def to_http_exception(error: Call2FAError) -> HTTPException:
    if isinstance(error, TransportError):
        return HTTPException(status_code=503, detail={"error": str(error)})

    detail = {"error": error.message}

    if isinstance(error, UnexpectedStatusError):
        detail["upstream_status"] = error.status_code
        detail["step"] = error.step

    return HTTPException(status_code=502, detail=detail)
