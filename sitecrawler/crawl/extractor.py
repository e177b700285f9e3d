"""
Structured content extraction from fetched markup
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple, Union

from bs4 import BeautifulSoup

from .config import CrawlConfig
from .models import ExtractedContent
from .url_resolver import try_resolve


logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r'\s+')

# Only dropped when the markup has no <body> element
HEAD_ONLY_TAGS = ['title', 'meta', 'link', 'base']


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(' ', text).strip()


def _dedupe(urls: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(urls))


class ContentExtractor:
    """Turns raw page markup into an ExtractedContent record"""

    def __init__(self, config: CrawlConfig = None):
        self.config = config or CrawlConfig()

    def extract(self, markup: Union[bytes, str, None], page_url: str,
                encoding: Optional[str] = None) -> ExtractedContent:
        """Extract title, description, body text, images and links.

        Images and links are resolved against ``page_url`` before any element
        is removed, so navigation links still count. ``encoding`` is the
        charset the response declared; without it byte markup is sniffed.
        """
        if isinstance(markup, bytes) and encoding:
            soup = BeautifulSoup(markup, 'html.parser', from_encoding=encoding)
        else:
            soup = BeautifulSoup(markup or b"", 'html.parser')

        title = self._extract_title(soup)
        description = self._extract_description(soup)
        images = self._resolve_all(soup.find_all('img', src=True), 'src', page_url)
        links = self._resolve_all(soup.find_all('a', href=True), 'href', page_url)

        if self.config.text_removal_selectors:
            for element in soup.select(', '.join(self.config.text_removal_selectors)):
                element.extract()

        body = soup.body
        if body is None:
            for element in soup.find_all(HEAD_ONLY_TAGS):
                element.extract()
            body = soup
        text = collapse_whitespace(body.get_text())

        return ExtractedContent(
            title=title,
            description=description,
            text=text,
            images=_dedupe(images),
            links=_dedupe(links),
            raw_image_count=len(images),
            raw_link_count=len(links),
        )

    def _extract_title(self, soup: BeautifulSoup) -> str:
        title_tag = soup.find('title')
        if title_tag:
            title = title_tag.get_text().strip()
            if title:
                return title

        og_title = self._meta_content(soup, property='og:title')
        if og_title:
            return og_title

        heading = soup.find('h1')
        if heading:
            text = heading.get_text().strip()
            if text:
                return text

        return self.config.no_title

    def _extract_description(self, soup: BeautifulSoup) -> str:
        description = (
            self._meta_content(soup, name='description')
            or self._meta_content(soup, property='og:description')
        )
        if description:
            return description

        paragraph = soup.find('p')
        if paragraph:
            text = paragraph.get_text().strip()
            if text:
                return text

        return self.config.no_description

    @staticmethod
    def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
        tag = soup.find('meta', attrs=attrs)
        if tag is None:
            return None
        content = tag.get('content')
        return content or None

    @staticmethod
    def _resolve_all(elements, attribute: str, page_url: str) -> List[str]:
        resolved = []
        for element in elements:
            raw = element.get(attribute)
            if isinstance(raw, list):
                raw = ' '.join(raw)
            url = try_resolve(raw, page_url)
            if url is None:
                logger.debug(f"Dropping unresolvable {attribute} {raw!r} on {page_url}")
                continue
            resolved.append(url)
        return resolved
