import logging
import threading
import time

from typing import Callable

from call2fa.domain.models.token import Token

logger = logging.getLogger(__name__)

DEFAULT_MARGIN = 300.0


class TokenGuard:
    def __init__(
        self,
        fetch: Callable[[], str],
        margin: float = DEFAULT_MARGIN,
        clock: Callable[[], float] = time.time,
    ):
        self.__fetch = fetch
        self.__margin = margin
        self.__clock = clock
        self.__lock = threading.Lock()
        self.__token: Token | None = None

    @property
    def token(self) -> Token | None:
        return self.__token

    def ensure_valid(self) -> Token:
        with self.__lock:
            # callers queued behind a renewal see its token here
            token = self.__token

            if token is not None and token.is_valid(self.__clock(), self.__margin):
                return token

            return self.__renew()

    def renew(self) -> Token:
        with self.__lock:
            return self.__renew()

    def invalidate(self) -> None:
        with self.__lock:
            self.__token = None

    def __renew(self) -> Token:
        logger.debug("Renewing Call2FA token")

        try:
            token = Token.from_jwt(self.__fetch())
        except Exception:
            logger.warning("Call2FA token renewal failed; keeping previous token")
            raise

        self.__token = token

        logger.info("Call2FA token renewed, expires at %s", int(token.expires_at))

        return token
