"""Recipe video lookup."""

import logging
from dataclasses import dataclass

from recipe_catalog.adapters.youtube_client import VideoClient

_logger = logging.getLogger(__name__)


@dataclass
class VideoService:
    """Finds a cooking video for a recipe title."""

    client: VideoClient | None

    async def lookup_video_id(self, title: str) -> str | None:
        """Return a video id for the title, or None if none could be found."""
        if self.client is None:
            _logger.info("Video lookup skipped: no client configured")
            return None
        try:
            return await self.client.search_video_id(f"{title} recipe in English")
        except Exception:
            _logger.exception("Video lookup failed: title=%s", title)
            return None
