from pydantic import (
    BaseModel,
    ConfigDict,
    SecretStr,
    StringConstraints
)
from typing import Annotated


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    login   : Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: SecretStr
