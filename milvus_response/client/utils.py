import re
from typing import Any

import orjson

from milvus_response.exceptions import ExceptionsMessage, NumberParseException
from milvus_response.settings import Config

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def json_value_to_str(value: Any) -> str:
    """Render a decoded JSON value as the text a JSON library would print for it.

    Strings are returned unchanged, booleans become ``"true"``/``"false"`` and
    objects or arrays are dumped back to compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return orjson.dumps(value).decode(Config.EncodeProtocol)


def parse_int(text: str, key: str = "") -> int:
    if _INT_LITERAL.fullmatch(text) is None:
        raise NumberParseException(message=ExceptionsMessage.NotInteger % (text, key))
    return int(text)


def parse_double(text: str, key: str = "") -> float:
    # python accepts digit separators, JSON number text never carries them
    if "_" in text:
        raise NumberParseException(message=ExceptionsMessage.NotDouble % (text, key))
    try:
        return float(text)
    except ValueError as e:
        raise NumberParseException(message=ExceptionsMessage.NotDouble % (text, key)) from e


def parse_bool(text: str) -> bool:
    """Anything but a case-insensitive ``"true"`` is False."""
    return text.lower() == "true"
