"""
frp_client - An asynchronous client for the frp admin REST API.

This package wraps the HTTP endpoints exposed by frp's client (frpc) and
server (frps) processes:
- Status, configuration read/update, reload and stop on frpc
- Server info, proxies by type and per-proxy traffic on frps
- Every call returns a Result instead of raising

Main Classes:
    FrpClient: The API client
    Result: Success/failure container returned by every operation
    Decoder: How a response body becomes a Python value

Exception Classes:
    FrpClientError: Base exception
    InvalidArgumentError: Raised for invalid constructor arguments
    RequestEncodingError: Request body could not be serialized
    ResponseDecodingError: Response body could not be decoded

Example:
    Reading frpc's status as JSON:

    >>> import asyncio
    >>> from frp_client import FrpClient
    >>> async def main():
    ...     async with FrpClient("http://127.0.0.1:7400", "admin", "admin") as client:
    ...         result = await client.get_status()
    ...         if result.is_success:
    ...             print(result.data)
    ...         else:
    ...             print(result.message)
    >>> asyncio.run(main())
"""

from .client import FrpClient, configure_logging, __version__
from .decoders import Decoder, TEXT, JSON, model
from .result import Result, FailureKind
from .models import (
    ServerInfo,
    ProxyStats,
    ProxyList,
    ProxyTraffic,
    ProxyStatus,
    ClientStatus,
)
from .exceptions import (
    FrpClientError,
    InvalidArgumentError,
    RequestEncodingError,
    ResponseDecodingError,
)

__all__ = [
    "FrpClient",
    "configure_logging",
    "Result",
    "FailureKind",
    "Decoder",
    "TEXT",
    "JSON",
    "model",
    "ServerInfo",
    "ProxyStats",
    "ProxyList",
    "ProxyTraffic",
    "ProxyStatus",
    "ClientStatus",
    "FrpClientError",
    "InvalidArgumentError",
    "RequestEncodingError",
    "ResponseDecodingError",
]
