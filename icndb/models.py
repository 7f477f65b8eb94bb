"""
Joke record and decoding of the ICNDB response envelope.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .errors import IcndbError

U64_MAX = 2 ** 64 - 1

# Entities ICNDB leaves escaped inside joke text. Replacements must not
# contain any of the keys, otherwise unescaping stops being idempotent.
HTML_ENTITIES: Dict[str, str] = {
    "&quot;": '"',
}


@dataclass(frozen=True)
class Joke:
    """A single joke. ``id`` lets the caller fetch the same joke again later."""
    id: int
    content: str
    categories: Tuple[str, ...] = ()


def unescape_content(text: str) -> str:
    """Replace the HTML entities ICNDB leaves in joke text."""
    for entity, replacement in HTML_ENTITIES.items():
        if entity in text:
            text = text.replace(entity, replacement)
    return text


def decode_joke(text: str) -> Joke:
    """
    Decode a response body into a Joke.

    ICNDB wraps every payload as ``{"value": {"id", "joke", "categories"}}``.
    The wrapper is dropped here and never reaches the caller.

    Args:
        text: Raw response body

    Returns:
        Joke with its content unescaped

    Raises:
        IcndbError: API kind, for anything that is not the expected envelope.
            The service answers some failures with a non-JSON page and a
            normal status, so a parse failure is blamed on the API.
    """
    try:
        data = json.loads(text)
    # Deeply nested bodies exhaust the decoder stack
    except (ValueError, RecursionError) as e:
        raise IcndbError.api(e) from e

    if not isinstance(data, dict) or not isinstance(data.get("value"), dict):
        raise IcndbError.api()

    return _joke_from_payload(data["value"])


def _joke_from_payload(payload: Dict[str, Any]) -> Joke:
    joke_id = payload.get("id")
    content = payload.get("joke")
    categories = payload.get("categories")

    # bool is an int subclass; true/false is not an id
    if isinstance(joke_id, bool) or not isinstance(joke_id, int):
        raise IcndbError.api()
    if not 0 <= joke_id <= U64_MAX:
        raise IcndbError.api()
    if not isinstance(content, str):
        raise IcndbError.api()
    if not isinstance(categories, list):
        raise IcndbError.api()
    if not all(isinstance(c, str) for c in categories):
        raise IcndbError.api()

    return Joke(
        id=joke_id,
        content=unescape_content(content),
        categories=tuple(categories),
    )
