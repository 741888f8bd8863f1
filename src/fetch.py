# ABOUTME: Single-attempt JSON fetch over httpx with swallow-and-log error handling.
# ABOUTME: Returns a FetchFailure marker instead of raising on transport, status, or decode errors.

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from src.config import USER_AGENT

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"User-Agent": USER_AGENT}


class FetchFailure(BaseModel):
    """Distinguished failure result from fetch_json."""

    context: str
    reason: str


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    context: str,
    params: dict | None = None,
    headers: dict | None = None,
) -> Any | FetchFailure:
    """GET a URL and decode its JSON body.

    The identifying User-Agent is always sent; caller headers are merged over it.
    Non-2xx statuses, transport errors, and invalid JSON are logged under the
    given context label and returned as a FetchFailure. Nothing is raised.
    """
    merged = {**DEFAULT_HEADERS, **(headers or {})}
    logger.debug("%s: GET %s params=%s", context, url, params)
    try:
        resp = await client.get(url, params=params, headers=merged)
        resp.raise_for_status()
        return resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("%s: %s", context, e)
        return FetchFailure(context=context, reason=str(e))
