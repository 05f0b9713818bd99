# skillquest/services/question_source.py
import logging
from typing import Any, Dict, List

import httpx

from skillquest.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class QuestionSource:
    """Client for the aptitude question API (one GET endpoint per topic)."""

    def __init__(self, client: httpx.AsyncClient, base_url: str, timeout: float = 10.0):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch_pool(self, endpoint: str) -> List[Dict[str, Any]]:
        """
        Fetch every question the API returns for ``endpoint``.

        A single object is returned as a one-element pool. Transport errors,
        non-2xx responses and bodies that are not questions raise UpstreamError.
        """
        url = f"{self._base_url}/{endpoint}"
        try:
            resp = await self._client.get(url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.error("Question source returned %s for %s", exc.response.status_code, url)
            raise UpstreamError("Failed to start test") from exc
        except httpx.HTTPError as exc:
            logger.error("Question source request failed for %s: %s", url, exc)
            raise UpstreamError("Failed to start test") from exc
        except ValueError as exc:
            logger.error("Question source sent a non-JSON body for %s", url)
            raise UpstreamError("Failed to start test") from exc

        pool = data if isinstance(data, list) else [data]
        if not all(isinstance(q, dict) for q in pool):
            logger.error("Question source sent an unexpected payload for %s", url)
            raise UpstreamError("Failed to start test")
        return pool
