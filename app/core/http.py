# app/core/http.py
import json
import logging
import re
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_ID_PATTERN = re.compile(r"-?[0-9]+")
# SQLite INTEGER is a signed 64-bit value
_MAX_ID = 2**63 - 1


def as_id(value: Any) -> int | None:
    # bool is an int subclass but never an id
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not -_MAX_ID <= value <= _MAX_ID:
        return None
    return value


def parse_id(raw: str) -> int | None:
    # Plain decimal integers only, anything else addresses nothing
    if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
        return None
    return as_id(int(raw))


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def as_text(value: Any) -> str:
    # Non-strings keep their JSON spelling
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def decode_body(raw: bytes) -> dict[str, Any]:
    # Content-Type is not consulted; anything but a JSON object reads as {}
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.debug("Ignoring body that is not valid JSON")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def json_body(schema: type[SchemaT]):
    async def dependency(request: Request) -> SchemaT:
        return schema.model_validate(decode_body(await request.body()))

    return dependency


__all__ = ["as_id", "as_text", "decode_body", "is_blank", "json_body", "parse_id"]
