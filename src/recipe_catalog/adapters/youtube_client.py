"""YouTube Data API search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class VideoClient(Protocol):
    """Interface for video search."""

    async def search_video_id(self, query: str) -> str | None:
        """Return the id of the best matching video, if any."""


@dataclass
class HttpxYouTubeClient(VideoClient):
    """HTTPX-backed YouTube search client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxYouTubeClient":
        """Create a YouTube client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_video_id(self, query: str) -> str | None:
        """Search for a single English video matching the query."""
        url = f"{self.base_url}/search"
        response = await self.http_client.get(
            url,
            params={
                "part": "snippet",
                "q": query,
                "type": "video",
                "maxResults": 1,
                "relevanceLanguage": "en",
                "key": self.api_key,
            },
            timeout=10,
        )
        response.raise_for_status()
        items = response.json().get("items") or []
        if not items:
            return None
        return items[0].get("id", {}).get("videoId")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
