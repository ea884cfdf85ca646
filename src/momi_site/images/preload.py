"""Fetch and decode images ahead of display."""

import asyncio
import logging
from io import BytesIO

import httpx
from PIL import Image

from momi_site.config import SITE_BASE_URL
from momi_site.images.query import get_image_url
from momi_site.models import ImageRecord

logger = logging.getLogger(__name__)

PRELOAD_TIMEOUT = 30


async def preload_image(src: str, client: httpx.AsyncClient | None = None) -> Image.Image:
    """Fetch one image and decode it.

    Raises ``httpx.HTTPError`` when the request fails and ``OSError`` when
    the payload is not a decodable image.
    """
    if client is None:
        async with httpx.AsyncClient(base_url=SITE_BASE_URL, timeout=PRELOAD_TIMEOUT) as owned:
            return await preload_image(src, owned)

    resp = await client.get(src)
    resp.raise_for_status()
    img = Image.open(BytesIO(resp.content))
    img.load()
    return img


async def preload_images(
    images: list[ImageRecord],
    limit: int = 5,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Preload up to ``limit`` images concurrently.

    Individual failures are ignored; the batch always completes. Returns
    the number of images that loaded.
    """
    batch = images[:limit]
    if not batch:
        return 0

    if client is None:
        async with httpx.AsyncClient(base_url=SITE_BASE_URL, timeout=PRELOAD_TIMEOUT) as owned:
            return await preload_images(batch, limit, owned)

    results = await asyncio.gather(
        *(preload_image(get_image_url(image), client) for image in batch),
        return_exceptions=True,
    )
    loaded = 0
    for image, result in zip(batch, results):
        if isinstance(result, BaseException):
            logger.debug("Preload failed for %s: %r", image.relative_path, result)
        else:
            loaded += 1
    return loaded
