from contextlib import asynccontextmanager
from fastapi import FastAPI

from call2fa.config.logging_config import configure_logging
from call2fa.infra.routes import (
    auth,
    call
)
from call2fa.utils.provider import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().LOG_LEVEL)

    yield


app = FastAPI(title="Call2FA API", lifespan=lifespan)

app.include_router(auth.router)
app.include_router(call.router)
