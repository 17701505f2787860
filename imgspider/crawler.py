"""The crawler: walks a site's navigation links and downloads its images."""

from __future__ import annotations

import sys

from .config import SpiderConfig
from .extract import find_image_names, find_links
from .http import HttpError, download, fetch, image_file_name


class Spider:
    """Crawls one site according to a :class:`SpiderConfig`."""

    def __init__(self, config: SpiderConfig) -> None:
        self.config = config
        self.links: list[str] = []
        self.images: list[str] = []

    def _fetch_page(self, path: str, browser_headers: bool) -> str:
        raw = fetch(self.config.hostname, path, self.config.use_tls, browser_headers)
        return raw.decode("utf-8", errors="replace")

    def _scan(self, page: str) -> None:
        self.links.extend(find_links(page, self.config.url, self.links))
        self.images.extend(find_image_names(page, self.images))

    def crawl(self) -> list[str]:
        """Read the index page and up to ``depth`` linked pages; return image names."""
        page = self._fetch_page("/", False)
        if self.config.use_tls and "302 Moved Temporarily" in page:
            raise HttpError("Redirection detected")
        self._scan(page)
        if not self.links:
            print("No links found in the index", file=sys.stderr)
        visited = 0
        # self.links grows while pages are scanned; new links are visited too.
        for link in self.links:
            if visited >= self.config.depth:
                break
            self._scan(self._fetch_page(link, self.config.use_tls))
            visited += 1
        return list(self.images)

    def download_images(self) -> list[str]:
        """Download every image found so far; return the files written."""
        saved = []
        for name in self.images:
            destination = image_file_name(name, self.config.path)
            try:
                download(self.config.hostname, name, destination, self.config.use_tls)
            except (HttpError, OSError) as exc:
                print(f"Error: {name}: {exc}", file=sys.stderr)
                continue
            saved.append(destination)
        return saved

    def run(self) -> list[str]:
        """Crawl the site and download its images; return the files written."""
        if not self.crawl():
            raise LookupError("no .jpg/jpeg .png .gif .bmp found")
        return self.download_images()