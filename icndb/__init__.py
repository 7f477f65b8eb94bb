# ICNDB client library
from .client import (
    ApiClient,
    ById,
    Random,
    Scheme,
    build_url,
    get_by_id,
    get_by_id_with_names,
    next_joke,
    next_joke_with_names,
)
from .config import Config
from .errors import ErrorKind, IcndbError
from .models import Joke, decode_joke, unescape_content

__all__ = [
    "ApiClient", "ById", "Random", "Scheme", "build_url",
    "get_by_id", "get_by_id_with_names", "next_joke", "next_joke_with_names",
    "Config", "ErrorKind", "IcndbError",
    "Joke", "decode_joke", "unescape_content",
]
