from jose import jwt
from jose.exceptions import JWTError
from pydantic import (
    BaseModel,
    ConfigDict
)
from typing import Any

from call2fa.domain.exceptions import SerializationError


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    jwt   : str
    claims: dict[str, Any]

    @classmethod
    def from_jwt(cls, raw: str) -> "Token":
        try:
            claims = jwt.get_unverified_claims(raw)
        except JWTError as e:
            raise SerializationError("Received JWT could not be decoded", cause=e) from e

        exp = claims.get("exp")

        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            raise SerializationError("JWT missing numeric 'exp' claim", context={"claims": sorted(claims)})

        return cls(jwt=raw, claims=claims)

    @property
    def expires_at(self) -> float:
        return float(self.claims["exp"])

    def is_valid(self, now: float, margin: float) -> bool:
        return now + margin < self.expires_at
