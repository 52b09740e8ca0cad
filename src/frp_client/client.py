"""
Asynchronous client for the frp admin REST API.

This module provides FrpClient, which wraps the HTTP endpoints served by the
frp client (frpc) and server (frps) processes:
- Basic authentication and JSON accept header set once per client
- One shared request routine for every endpoint
- Failures returned as Result objects instead of raised
"""

import asyncio
import base64
import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote, urlparse
from pathlib import Path

import httpx
from pydantic import BaseModel

from . import decoders
from .decoders import Decoder
from .exceptions import (
    InvalidArgumentError,
    RequestEncodingError,
    ResponseDecodingError,
)
from .result import FailureKind, Result

__version__ = "0.1.0"

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _setup_default_logging() -> logging.Logger:
    """Set up default logging configuration for FrpClient."""
    logger = logging.getLogger('frp_client')

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        )

        logger.addHandler(console_handler)

        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False

    return logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    error_file: Optional[str] = None,
    console_output: bool = True,
    log_format: Optional[str] = None
) -> None:
    """
    Configure logging for the frp_client package.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to general log file (e.g., 'frp_client.log')
        error_file: Path to error-only log file (e.g., 'error.log')
        console_output: Whether to output logs to console/stdout
        log_format: Custom log format string

    Example:
        # Request/response tracing to a file
        configure_logging(log_level='DEBUG', log_file='frp.log')

        # Only failed requests, no console noise
        configure_logging(
            log_level='WARNING',
            error_file='frp-errors.log',
            console_output=False,
        )
    """
    logger = logging.getLogger('frp_client')

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Failed requests are logged at WARNING, so the error file keeps those too
    if error_file:
        Path(error_file).parent.mkdir(parents=True, exist_ok=True)

        error_handler = logging.FileHandler(error_file, encoding='utf-8')
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(formatter)
        logger.addHandler(error_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.propagate = False
    logger.info(f"Logging configured: level={log_level}, console={console_output}, "
                f"log_file={log_file}, error_file={error_file}")


def _describe(exc: BaseException) -> str:
    # httpx transport errors often carry no text
    return str(exc) or type(exc).__name__


class FrpClient:
    """
    Client for the admin API of frpc and frps.

    Every operation is a coroutine returning a :class:`Result`. Pass
    ``decoder=`` to choose how the response body is interpreted.
    """

    def __init__(
        self,
        base_address: str,
        username: str,
        password: str,
        *,
        timeout: Union[int, float] = 30.0,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the FrpClient. No request is sent.

        Args:
            base_address: Root URL of the admin API, e.g. ``http://127.0.0.1:7400``
            username: Basic auth user (``webServer.user``)
            password: Basic auth password (``webServer.password``)
            timeout: Per-request timeout in seconds
            verify_ssl: Verify TLS certificates
            user_agent: User-Agent header value
            transport: Custom httpx transport, mainly for tests

        Raises:
            InvalidArgumentError: If base_address or timeout is invalid
        """
        self.base_address = self._validate_base_address(base_address)
        self.timeout = self._validate_timeout(timeout)
        self.username = username
        self.user_agent = user_agent or f"frp-client/{__version__}"
        self.verify_ssl = verify_ssl

        token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        headers = {
            "Authorization": f"Basic {token}",
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": self.user_agent,
        }

        client_kwargs: Dict[str, Any] = {
            "base_url": self.base_address,
            "headers": headers,
            "timeout": httpx.Timeout(self.timeout),
            "verify": verify_ssl,
        }
        if transport is not None:
            client_kwargs["transport"] = transport

        self.session = httpx.AsyncClient(**client_kwargs)

        self.logger = _setup_default_logging()
        self.logger.info(f"FrpClient initialized: base_address={self.base_address}, "
                         f"user={username}, timeout={self.timeout}")

    def _validate_base_address(self, base_address: str) -> str:
        """Validate base_address parameter."""
        if not isinstance(base_address, str) or not base_address.strip():
            raise InvalidArgumentError("base_address", base_address, "non-empty URL string")

        base_address = base_address.strip()
        parsed = urlparse(base_address)
        if not parsed.scheme or not parsed.netloc:
            raise InvalidArgumentError(
                "base_address", base_address, "absolute URL such as http://host:port"
            )
        return base_address

    def _validate_timeout(self, timeout: Union[int, float]) -> Union[int, float]:
        """Validate timeout parameter."""
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise InvalidArgumentError("timeout", timeout, "positive number")
        return timeout

    # -- frpc ---------------------------------------------------------------

    async def get_status(self, decoder: Decoder[Any] = decoders.JSON) -> Result[Any]:
        """GET /api/status: state of every proxy run by frpc."""
        return await self._send("/api/status", "GET", decoder=decoder)

    async def get_config(
        self,
        content_type: str = TEXT_CONTENT_TYPE,
        decoder: Optional[Decoder[Any]] = None,
    ) -> Result[Any]:
        """
        GET /api/config: the configuration file frpc is running with.

        Args:
            content_type: ``text/plain`` returns the file as-is; anything else
                decodes the body as JSON unless ``decoder`` is given
            decoder: Override for the response decoder
        """
        return await self._send(
            "/api/config",
            "GET",
            content_type=content_type,
            decoder=decoder or decoders.for_content_type(content_type),
        )

    async def update_config(
        self,
        config: Any,
        content_type: str = TEXT_CONTENT_TYPE,
        decoder: Optional[Decoder[Any]] = None,
    ) -> Result[Any]:
        """
        PUT /api/config: replace frpc's configuration file.

        frpc only writes the file; call :meth:`reload_config` to apply it.

        Args:
            config: New configuration. A ``str`` is sent verbatim when
                content_type is ``text/plain``; anything else is sent as JSON
            content_type: Content-Type of the request body
            decoder: Override for the response decoder
        """
        return await self._send(
            "/api/config",
            "PUT",
            body=config,
            content_type=content_type,
            decoder=decoder or decoders.for_content_type(content_type),
        )

    async def reload_config(self, decoder: Decoder[Any] = decoders.TEXT) -> Result[Any]:
        """GET /api/reload: make frpc re-read its configuration file."""
        return await self._send("/api/reload", "GET", decoder=decoder)

    async def stop(self) -> Result[None]:
        """
        POST /api/stop: ask frpc to exit.

        Fire-and-forget: once the request is sent the call succeeds, whatever
        the server answers. A timeout or task cancellation while sending also
        counts as success, since frpc may exit before replying.
        """
        self.logger.debug("Sending POST /api/stop")
        try:
            response = await self.session.post("/api/stop")
            self.logger.info(f"POST {response.request.url} -> {response.status_code} (ignored)")
            return Result.success(None)
        except (httpx.TimeoutException, asyncio.CancelledError) as e:
            self.logger.info(f"POST /api/stop interrupted ({type(e).__name__}), treating as sent")
            return Result.success(None)
        except Exception as e:
            self.logger.warning(f"POST /api/stop failed: {type(e).__name__}: {_describe(e)}")
            return Result.failure(_describe(e), self._kind_of(e))

    # -- frps ---------------------------------------------------------------

    async def get_server_info(self, decoder: Decoder[Any] = decoders.JSON) -> Result[Any]:
        """GET /api/serverinfo: frps version, ports and traffic totals."""
        return await self._send("/api/serverinfo", "GET", decoder=decoder)

    async def get_proxies_by_type(
        self, proxy_type: str, decoder: Decoder[Any] = decoders.JSON
    ) -> Result[Any]:
        """
        GET /api/proxy/{proxy_type}: proxies of one type registered on frps.

        Args:
            proxy_type: ``tcp``, ``udp``, ``http``, ``https``, ``stcp``, ...
            decoder: Response decoder
        """
        if not proxy_type or not str(proxy_type).strip():
            return Result.failure("proxy_type must be a non-empty string")
        return await self._send(f"/api/proxy/{self._segment(proxy_type)}", "GET", decoder=decoder)

    async def get_traffic_by_proxy(
        self, proxy_name: str, decoder: Decoder[Any] = decoders.JSON
    ) -> Result[Any]:
        """GET /api/traffic/{proxy_name}: daily traffic of one proxy on frps."""
        if not proxy_name or not str(proxy_name).strip():
            return Result.failure("proxy_name must be a non-empty string")
        return await self._send(f"/api/traffic/{self._segment(proxy_name)}", "GET", decoder=decoder)

    # -- internals ----------------------------------------------------------

    @staticmethod
    def _segment(value: str) -> str:
        return quote(str(value), safe="")

    @staticmethod
    def _encode_body(body: Any, content_type: str) -> Tuple[bytes, str]:
        """
        Serialize a request body.

        Returns:
            Encoded bytes and the Content-Type header to send with them

        Raises:
            RequestEncodingError: If the body cannot be serialized to JSON
        """
        # Bodies are always UTF-8, whatever charset the caller named
        params = [
            part.strip() for part in content_type.split(";")
            if part.strip() and not part.strip().lower().startswith("charset=")
        ]
        header = "; ".join(params + ["charset=utf-8"])

        if isinstance(body, str) and decoders.is_text_plain(content_type):
            return body.encode("utf-8"), header

        try:
            if isinstance(body, BaseModel):
                text = body.model_dump_json(by_alias=True)
            else:
                text = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise RequestEncodingError(content_type, e) from e
        return text.encode("utf-8"), header

    @staticmethod
    def _kind_of(exc: Exception) -> FailureKind:
        if isinstance(exc, httpx.HTTPStatusError):
            return FailureKind.HTTP_STATUS
        if isinstance(exc, httpx.TimeoutException):
            return FailureKind.TIMEOUT
        if isinstance(exc, httpx.TransportError):
            return FailureKind.TRANSPORT
        if isinstance(exc, RequestEncodingError):
            return FailureKind.SERIALIZATION
        if isinstance(exc, ResponseDecodingError):
            return FailureKind.DESERIALIZATION
        return FailureKind.UNKNOWN

    async def _send(
        self,
        path: str,
        method: str,
        body: Any = None,
        content_type: str = JSON_CONTENT_TYPE,
        decoder: Decoder[Any] = decoders.JSON,
    ) -> Result[Any]:
        """
        Send one request and translate the outcome into a Result.

        Task cancellation is not caught here and reaches the caller.

        Args:
            path: Endpoint path relative to the base address
            method: HTTP method
            body: Optional request body
            content_type: Content-Type of the body
            decoder: Decoder applied to the response text

        Returns:
            Result holding the decoded body, or the failure message
        """
        try:
            headers: Dict[str, str] = {}
            content = None
            if body is not None:
                content, headers["Content-Type"] = self._encode_body(body, content_type)

            self.logger.debug(
                f"Sending {method} {path} (body: {len(content) if content else 0} bytes, "
                f"decoder: {decoder.name})")
            response = await self.session.request(method, path, content=content, headers=headers)

            self.logger.info(
                f"{method} {response.request.url} -> {response.status_code} "
                f"({len(response.content)} bytes)")

            response.raise_for_status()
            return Result.success(decoder(response.text))

        except Exception as e:
            kind = self._kind_of(e)
            status_code = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            self.logger.warning(f"{method} {path} failed ({kind.value}): {_describe(e)}")
            return Result.failure(_describe(e), kind, status_code)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self.session.aclose()
        self.logger.info("FrpClient session closed")

    async def __aenter__(self) -> 'FrpClient':
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the async context manager and close the session."""
        await self.aclose()
