import logging
from typing import Any

import httpx

from .admission import InvalidBeatmapId
from .config import get_settings

logger = logging.getLogger(__name__)


class OsuClient:
    """Thin wrapper over the osu! v1 ``get_beatmaps`` endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def get_beatmapset(self, set_id: int | str) -> list[dict[str, Any]]:
        """Fetch every difficulty of a set. Raises InvalidBeatmapId on any lookup failure."""
        params = {"k": self.api_key, "s": str(set_id)}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(f"{self.base_url}/get_beatmaps", params=params)
                response.raise_for_status()
                rows = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.info("Beatmap lookup for set %s failed: %s", set_id, exc)
            raise InvalidBeatmapId(str(exc)) from exc

        if not isinstance(rows, list) or not rows:
            raise InvalidBeatmapId(f"no beatmaps found for set {set_id}")
        return rows


def get_osu_client() -> OsuClient:
    settings = get_settings()
    return OsuClient(
        settings.osu_api_key,
        settings.osu_api_url,
        timeout=settings.osu_request_timeout_seconds,
    )
