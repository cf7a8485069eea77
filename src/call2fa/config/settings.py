from pathlib import Path
from pydantic import StringConstraints
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict
)
from typing import Annotated

ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"

DEFAULT_BASE_URL = "https://api-call2fa-v2.rikkicom.io"


class Settings(BaseSettings):
    CALL2FA_LOGIN   : Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    CALL2FA_PASSWORD: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    CALL2FA_BASE_URL: str = DEFAULT_BASE_URL

    CALL2FA_TIMEOUT     : float = 20.0
    CALL2FA_TOKEN_MARGIN: float = 300.0

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
    )
