"""Shared schema pieces — camelCase wire format, text cleaning, response envelope."""

import html
from typing import Any

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; Python code uses snake_case."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


def clean_text(value: str) -> str:
    """Strip surrounding whitespace and HTML-escape."""
    return html.escape(value.strip(), quote=True)


def require_text(value: str) -> str:
    """clean_text, rejecting values that are empty after stripping."""
    cleaned = clean_text(value)
    if not cleaned:
        raise ValueError("cannot be empty or whitespace")
    return cleaned


MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


def clean_url(value: str) -> str:
    """Strip and require an absolute http(s) URL; the URL is kept as sent."""
    stripped = value.strip()
    if len(stripped) > MAX_URL_LENGTH:
        raise ValueError(f"URL must be at most {MAX_URL_LENGTH} characters")
    try:
        _http_url.validate_python(stripped)
    except ValidationError:
        raise ValueError("must be a valid http(s) URL")
    return stripped


def envelope(data: Any) -> dict:
    """Wrap a payload in the success envelope."""
    return {"success": True, "data": data}


def message(text: str) -> dict:
    return {"success": True, "message": text}


def dump(model: BaseModel) -> dict:
    return model.model_dump(mode="json", by_alias=True)
