"""Best-effort page metadata for bookmarks.

Extraction is literal pattern matching, not HTML parsing: the first
``<title>`` element and the first ``<meta name="description">`` tag win,
nested markup inside the title is not understood, and entities are left
as written. Pages that do not fit these patterns fall back to the URL.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

import httpx

from notemark.config import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
_DESCRIPTION_RES = (
    # name before content
    re.compile(
        r"""<meta[^>]*name=["']description["'][^>]*content=["']([^"']+)["'][^>]*>""",
        re.IGNORECASE,
    ),
    # content before name
    re.compile(
        r"""<meta[^>]*content=["']([^"']+)["'][^>]*name=["']description["'][^>]*>""",
        re.IGNORECASE,
    ),
)


@dataclass(frozen=True)
class Metadata:
    title: str
    description: Optional[str] = None


def extract_metadata(html: str, url: str) -> Metadata:
    """Pull a title and meta description out of raw HTML.

    The title falls back to ``url`` when no non-blank ``<title>`` is found.
    The description is ``None`` when no description meta tag matches, which
    callers use to tell "nothing found" apart from an empty value.
    """
    title = url
    title_match = _TITLE_RE.search(html)
    if title_match and title_match.group(1).strip():
        title = title_match.group(1).strip()

    description = None
    for pattern in _DESCRIPTION_RES:
        match = pattern.search(html)
        if match:
            description = match.group(1).strip()
            break

    return Metadata(title=title, description=description)


class MetadataService:
    """Fetches a bookmark's page and extracts its metadata.

    Fetch failures (transport errors, timeouts, non-2xx responses) never
    propagate; they yield ``Metadata(title=url)``.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    async def extract(self, url: str) -> Metadata:
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                html = response.text
        except httpx.HTTPError as e:
            logger.warning("Metadata fetch failed for %s: %s", url, e)
            return Metadata(title=url)

        return extract_metadata(html, url)
