# bible_refs/services/references/verse_client.py
"""
Verse API access.

VerseFetcher is the port the resolver talks to; BibleApiClient implements it
over the Bible REST API:

    GET {base_url}/verses/{version}/{abbrev}/{chapter}
    GET {base_url}/verses/{version}/{abbrev}/{chapter}/{number}

Failures are raised as VerseApiError subclasses (see errors.py).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import httpx

from .errors import (
    VerseNotFoundError,
    UnexpectedResponseError,
    VerseApiFailure,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verse:
    """A single verse as returned by the API."""
    number: int
    text: str

    def to_dict(self) -> dict:
        return {"number": self.number, "text": self.text}


def verse_path(version: str, abbrev: str, chapter: int, number: Optional[int] = None) -> str:
    """Path of a chapter or verse resource: /verses/kjv/jo/3[/16]"""
    path = f"/verses/{version}/{abbrev}/{chapter}"
    if number is not None:
        path += f"/{number}"
    return path


class VerseFetcher(ABC):
    """
    Source of verse text.

    Implementations raise VerseApiError subclasses on failure and never
    return partial data. The resolver records any other exception as a
    Failure for that one reference.
    """

    @abstractmethod
    async def fetch_chapter(self, version: str, abbrev: str, chapter: int) -> list[Verse]:
        """Fetch every verse of a chapter, in order."""

    @abstractmethod
    async def fetch_verse(self, version: str, abbrev: str, chapter: int, number: int) -> Verse:
        """Fetch one verse."""

    async def aclose(self):
        """Release any held resources."""


class BibleApiClient(VerseFetcher):
    """
    Async client for the Bible REST API.

    Keeps a pooled keep-alive connection for the lifetime of the client.

    Usage:
        async with BibleApiClient(base_url, token="...") as client:
            verse = await client.fetch_verse("nvi", "jo", 3, 16)
            print(verse.text)

            verses = await client.fetch_chapter("kjv", "sl", 23)
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _call_url(self, path: str) -> dict:
        """
        GET a path and return the decoded JSON body.

        Raises:
            VerseNotFoundError: On 404
            UnexpectedResponseError: On any other non-200 status or a body
                that is not a JSON object
            VerseApiFailure: On timeout or connection failure
        """
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.warning(f"Unexpected error when calling Bible API at endpoint \"{path}\": {e}")
            raise VerseApiFailure(path, str(e)) from e

        if response.status_code == 404:
            logger.info(f"404 Not Found on Bible API at endpoint \"{path}\"")
            raise VerseNotFoundError(path)

        if response.status_code != 200:
            logger.warning(f"Error {response.status_code} calling Bible API at endpoint \"{path}\"")
            raise UnexpectedResponseError(path, f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from Bible API at endpoint \"{path}\": {e}")
            raise UnexpectedResponseError(path, "invalid JSON body") from e

        if not isinstance(data, dict):
            raise UnexpectedResponseError(path, "expected a JSON object")
        return data

    @staticmethod
    def _to_verse(item, path: str) -> Verse:
        try:
            return Verse(number=int(item["number"]), text=item["text"])
        except (KeyError, TypeError, ValueError) as e:
            raise UnexpectedResponseError(path, f"malformed verse: {e}") from e

    async def fetch_chapter(self, version: str, abbrev: str, chapter: int) -> list[Verse]:
        path = verse_path(version, abbrev, chapter)
        data = await self._call_url(path)

        verses = data.get("verses")
        if not isinstance(verses, list):
            raise UnexpectedResponseError(path, "missing verses list")
        return [self._to_verse(item, path) for item in verses]

    async def fetch_verse(self, version: str, abbrev: str, chapter: int, number: int) -> Verse:
        path = verse_path(version, abbrev, chapter, number)
        data = await self._call_url(path)
        return self._to_verse(data, path)

