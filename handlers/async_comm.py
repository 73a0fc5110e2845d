"""Asynchronous HTTP client used by the translation providers.

Responses are decoded by Content-Type (JSON or text). Transport problems are reported as
AsyncCommError and its subclasses so that providers only need to handle one family of errors.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal, Self, TypeAlias

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = ["AsyncCommError", "AsyncCommInvalidContentTypeError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod: TypeAlias = Literal["GET", "POST"]

CONNECT_TIMEOUT: Final[float] = 5.0


def _decode_text(raw: bytes) -> str:
    return raw.decode("utf-8")


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


class AsyncHttp:
    """Thin wrapper around a lazily created aiohttp session.

    The session is opened on the first request, so an instance can be built before the event loop
    runs. Closing the client drops the session; the next request opens a fresh one.

    Attributes:
        DECODERS (ClassVar[dict[str, Callable[[bytes], Any]]]): Body decoders keyed by media type.
    """

    DECODERS: ClassVar[dict[str, Callable[[bytes], Any]]] = {
        "application/json": _decode_json,
        "text/plain": _decode_text,
        "text/html": _decode_text,
    }

    def __init__(self) -> None:
        self.__session: ClientSession | None = None
        logger.debug("%s created", self.__class__.__name__)

    async def __aenter__(self) -> Self:
        _ = self.session
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    @property
    def session(self) -> ClientSession:
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(raise_for_status=True)
            logger.debug("%s session initialized", self.__class__.__name__)
        return self.__session

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    async def close(self) -> None:
        if self.is_open:
            await self.session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(self, *, url: str, headers: dict[str, str] | None = None, total_timeout: float = 10.0) -> Any:
        """Send a GET request and return the decoded body."""
        return await self._request("GET", url=url, headers=headers, total_timeout=total_timeout)

    async def post(
        self,
        *,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        total_timeout: float = 10.0,
    ) -> Any:
        """Send ``data`` as a JSON body and return the decoded response.

        Args:
            url (str): Endpoint URL.
            data (Any | None): JSON-serialisable request body.
            headers (dict[str, str] | None): Extra headers. They carry credentials and are never logged.
            total_timeout (float): Deadline for the whole exchange in seconds; 0 or less disables it.

        Returns:
            Any: Parsed JSON, text, or None for an empty body.

        Raises:
            AsyncCommTimeoutError: If the server does not answer in time.
            AsyncCommInvalidContentTypeError: If the body cannot be decoded.
            AsyncCommError: If the connection fails or the server answers with an error status.
        """
        return await self._request("POST", url=url, headers=headers, total_timeout=total_timeout, json=data)

    @staticmethod
    def build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        # The connect phase never gets longer than the whole request.
        return aiohttp.ClientTimeout(connect=min(CONNECT_TIMEOUT, total_timeout), total=total_timeout)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response body according to its media type.

        Raises:
            AsyncCommInvalidContentTypeError: If the media type is unknown or the body is malformed.
        """
        media_type: str = resp.content_type
        raw: bytes = await resp.read()
        if not raw:
            return None

        decoder: Callable[[bytes], Any] | None = self.DECODERS.get(media_type)
        if decoder is None:
            msg: str = f"Unknown Content-Type '{media_type}'"
            raise AsyncCommInvalidContentTypeError(msg)
        try:
            return decoder(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            msg = f"Failed to decode '{media_type}' response body"
            raise AsyncCommInvalidContentTypeError(msg) from err

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        headers: dict[str, str] | None,
        total_timeout: float,
        **kwargs: Any,
    ) -> Any:
        logger.debug("%s '%s' (timeout %.1f sec)", method, url, total_timeout)
        try:
            async with self.session.request(
                method, url, headers=headers, timeout=self.build_timeout(total_timeout), **kwargs
            ) as resp:
                return await self.decode_response(resp)
        except TimeoutError as err:
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug("Error status from '%s': %s", url, err.status)
            raise AsyncCommError("Error response from the server.", status=err.status) from err
        except aiohttp.ClientConnectorError as err:
            msg = "The server is unreachable."
            raise AsyncCommError(msg) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            msg = f"HTTP client error: {err}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """An HTTP exchange failed.

    Attributes:
        status (int | None): HTTP status code when the server answered with an error.
    """

    def __init__(self, msg: str, *, status: int | None = None) -> None:
        self.status: int | None = status
        super().__init__(f"{msg}: status='{status}'" if status is not None else msg)


class AsyncCommTimeoutError(AsyncCommError):
    """The server did not answer before the deadline."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response body has an unknown media type or could not be decoded."""
