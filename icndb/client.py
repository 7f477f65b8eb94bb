"""
ICNDB API client.

Builds request URLs, performs a single GET per call and maps every failure
onto an IcndbError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import httpx

from .errors import IcndbError
from .models import U64_MAX, Joke, decode_joke

logger = logging.getLogger(__name__)

DEFAULT_HOST = "api.icndb.com"


class Scheme(Enum):
    """Transport scheme, fixed when the client is constructed."""
    PLAIN = "http"
    ENCRYPTED = "https"


@dataclass(frozen=True)
class Random:
    """Selects a random joke."""


@dataclass(frozen=True)
class ById:
    """Selects the joke with the given id."""
    id: int


Operation = Union[Random, ById]


def _check_id(joke_id: int) -> int:
    if isinstance(joke_id, bool) or not isinstance(joke_id, int):
        raise ValueError(f"joke id must be an integer, got {joke_id!r}")
    if not 0 <= joke_id <= U64_MAX:
        raise ValueError(f"joke id out of range: {joke_id}")
    return joke_id


def build_url(
    operation: Operation,
    names: Optional[Tuple[str, str]] = None,
    scheme: Scheme = Scheme.PLAIN,
    host: str = DEFAULT_HOST
) -> str:
    """
    Build the request URL for an operation.

    Args:
        operation: Random() or ById(id)
        names: Optional (first, last) replacing "Chuck Norris" in the joke
        scheme: http or https
        host: API host

    Returns:
        Complete URL string

    Names are inserted as-is, without percent-encoding. A name containing
    '&' or '#' will produce a broken query.
    """
    if isinstance(operation, ById):
        path = f"/jokes/{_check_id(operation.id)}"
    elif isinstance(operation, Random):
        path = "/jokes/random"
    else:
        raise TypeError(f"unknown operation: {operation!r}")

    url = f"{scheme.value}://{host}{path}"
    if names is not None:
        first, last = names
        url += f"?firstName={first}&lastName={last}"
    return url


class ApiClient:
    """Client for api.icndb.com."""

    def __init__(
        self,
        scheme: Scheme = Scheme.PLAIN,
        host: str = DEFAULT_HOST,
        http_client: Optional[httpx.Client] = None
    ):
        self.scheme = scheme
        self.host = host

        # The transport's default timeout is left as it is
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else httpx.Client()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self):
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self.client.close()

    def next(self) -> Joke:
        """Fetch a random joke."""
        return self._fetch(Random())

    def next_with_names(self, first: str, last: str) -> Joke:
        """Fetch a random joke starring someone other than Chuck Norris."""
        return self._fetch(Random(), (first, last))

    def get_by_id(self, joke_id: int) -> Joke:
        """
        Fetch a specific joke.

        The id is sent as given; the server decides whether it exists and
        the returned joke's id is not guaranteed to match it.

        Raises:
            ValueError: if the id is not an unsigned 64-bit integer. No
                request is made.
            IcndbError: if the request, decoding or envelope fails.
        """
        return self._fetch(ById(joke_id))

    def get_by_id_with_names(self, joke_id: int, first: str, last: str) -> Joke:
        """Fetch a specific joke with the names replaced."""
        return self._fetch(ById(joke_id), (first, last))

    def _fetch(
        self,
        operation: Operation,
        names: Optional[Tuple[str, str]] = None
    ) -> Joke:
        url = build_url(operation, names, self.scheme, self.host)
        text = self._execute_request(url)
        try:
            return decode_joke(text)
        except IcndbError as e:
            logger.warning("Unexpected response from %s: %s", url, e.cause or e)
            raise

    def _execute_request(self, url: str) -> str:
        """
        GET a URL and return the whole body as text.

        Raises:
            IcndbError: NETWORK if the request does not complete, DECODE if
                the body cannot be turned into text.
        """
        logger.debug("GET %s", url)
        try:
            response = self.client.get(url)
        except httpx.DecodingError as e:
            logger.warning("Could not decode body from %s: %s", url, e)
            raise IcndbError.decode(e) from e
        except (httpx.RequestError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise IcndbError.network(e) from e

        # Status code is ignored; ICNDB reports errors in the body, if at all
        charset = response.charset_encoding or "utf-8"
        try:
            return response.content.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning("Could not decode body from %s as %s: %s", url, charset, e)
            raise IcndbError.decode(e) from e


def next_joke() -> Joke:
    """Fetch a random joke with a one-off client."""
    with ApiClient() as client:
        return client.next()


def next_joke_with_names(first: str, last: str) -> Joke:
    """Fetch a random joke with the names replaced, using a one-off client."""
    with ApiClient() as client:
        return client.next_with_names(first, last)


def get_by_id(joke_id: int) -> Joke:
    """Fetch a specific joke with a one-off client."""
    with ApiClient() as client:
        return client.get_by_id(joke_id)


def get_by_id_with_names(joke_id: int, first: str, last: str) -> Joke:
    """Fetch a specific joke with the names replaced, using a one-off client."""
    with ApiClient() as client:
        return client.get_by_id_with_names(joke_id, first, last)
