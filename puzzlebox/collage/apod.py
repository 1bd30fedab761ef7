"""Collect image links from the picture-of-the-day archive."""

from __future__ import annotations

import re
from collections.abc import Iterator
from urllib.request import urlopen

PAGE_PATTERN = re.compile(r"(ap\d{6}.html)", re.IGNORECASE)
IMAGE_PATTERN = re.compile(r'src="(image/[^"]*)"', re.IGNORECASE)


def scrape(url: str, pattern: re.Pattern[str]) -> list[str]:
    """Return the first group of the first match of ``pattern`` on each line at ``url``."""
    with urlopen(url) as response:
        status = getattr(response, "status", 200)
        if status != 200:
            raise OSError(f"{status} {getattr(response, 'reason', '')}".strip())
        links = []
        for raw in response:
            match = pattern.search(raw.decode("latin-1"))
            if match:
                links.append(match.group(1))
    return links


def scrape_image_urls(main_url: str) -> Iterator[str]:
    """Yield the URL of every image linked from the archive pages of ``main_url``."""
    base_url = main_url[: main_url.rfind("/")]
    for page in scrape(main_url, PAGE_PATTERN):
        try:
            images = scrape(f"{base_url}/{page}", IMAGE_PATTERN)
        except OSError as exc:
            raise OSError(f"{page}: {exc}") from exc
        for image in images:
            yield f"{base_url}/{image}"