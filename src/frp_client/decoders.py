"""
Response decoders.

A decoder turns the response text into the value the caller asked for and
names the value to use when the server sends an empty body.

    >>> from frp_client import decoders
    >>> decoders.TEXT.decode('{"proxies":[]}')
    '{"proxies":[]}'
    >>> decoders.JSON.decode('{"proxies":[]}')
    {'proxies': []}
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import ResponseDecodingError

T = TypeVar("T")


@dataclass(frozen=True)
class Decoder(Generic[T]):
    decode: Callable[[str], T]
    empty: Optional[T] = None
    name: str = "custom"

    def __call__(self, text: str) -> Optional[T]:
        """Decode ``text``, returning ``empty`` for blank bodies.

        Raises:
            ResponseDecodingError: If ``decode`` fails
        """
        if not text or not text.strip():
            return self.empty
        try:
            return self.decode(text)
        except ResponseDecodingError:
            raise
        except (ValueError, TypeError, ValidationError) as e:
            raise ResponseDecodingError(e, text) from e


TEXT: Decoder[str] = Decoder(decode=lambda text: text, empty="", name="text")
JSON: Decoder[Any] = Decoder(decode=json.loads, empty=None, name="json")


def model(tp: Any) -> Decoder[Any]:
    """
    Build a decoder validating JSON into ``tp``.

    ``tp`` is anything pydantic can validate: a ``BaseModel`` subclass, a
    dataclass, or a typing construct such as ``list[ProxyStats]``.

    Args:
        tp: Target type

    Returns:
        Decoder producing instances of ``tp`` (``None`` for empty bodies)
    """
    adapter = TypeAdapter(tp)
    name = getattr(tp, "__name__", repr(tp))
    return Decoder(decode=adapter.validate_json, empty=None, name=name)


def for_content_type(content_type: str) -> Decoder[Any]:
    """TEXT for text/plain, JSON for anything else."""
    if is_text_plain(content_type):
        return TEXT
    return JSON


def is_text_plain(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == "text/plain"
