"""Scrape the BCA e-Rate USD sell rate through the allorigins proxy."""

from __future__ import annotations

import re
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from kurs_pricing.config import BCA_RATE_URL, PROXY_URL, REQUEST_TIMEOUT
from kurs_pricing.errors import NetworkError, RateNotFound
from kurs_pricing.ingestion.strategy import RateExtractor
from kurs_pricing.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Zero-based index of the "e-Rate jual" cell on the BCA kurs table.
RATE_COLUMN_INDEX = 6


def build_proxy_url(source_url: str = BCA_RATE_URL, proxy_url: str = PROXY_URL) -> str:
    """Return the proxy URL that wraps ``source_url``."""

    return f"{proxy_url}?url={quote(source_url, safe='')}"


def _normalise_rate_text(raw: str) -> int:
    cleaned = re.sub(r"[^0-9.,]", "", raw)
    cleaned = re.sub(r"[.,][0-9]{2}$", "", cleaned)
    cleaned = re.sub(r"[.,]", "", cleaned)
    return int(cleaned)


def parse_bca_rate(
    html: str, *, currency: str = "USD", column: int = RATE_COLUMN_INDEX
) -> int:
    """Extract the integer rate for ``currency`` from the BCA kurs page.

    Every ``<tr>`` whose text mentions ``currency`` and has more than
    ``column`` cells is considered; the last such row wins. The cell text is
    stripped down to digits and separators, a trailing two-digit decimal part
    is dropped and the remaining separators are removed, so ``16.234,00``
    becomes ``16234``.
    """

    soup = BeautifulSoup(html, "html.parser")
    rate: int | None = None
    for tr in soup.find_all("tr"):
        if currency not in tr.get_text():
            continue
        cells = tr.find_all("td")
        if len(cells) <= column:
            continue
        raw = cells[column].get_text().strip()
        try:
            rate = _normalise_rate_text(raw)
        except ValueError:
            LOGGER.debug("Unparsable %s rate cell %r", currency, raw)
            rate = None
    if not rate:
        raise RateNotFound(f"No {currency} rate found in column {column + 1}")
    return rate


class BCARateProvider:
    """Fetch the BCA kurs page through the proxy and extract the USD rate."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        source_url: str = BCA_RATE_URL,
        proxy_url: str = PROXY_URL,
        timeout: float = REQUEST_TIMEOUT,
        currency: str = "USD",
        extractor: RateExtractor | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", "kurs-pricing/1.0")
        self.source_url = source_url
        self.proxy_url = proxy_url
        self.timeout = timeout
        self.currency = currency
        self.extractor = extractor

    @property
    def url(self) -> str:
        return build_proxy_url(self.source_url, self.proxy_url)

    def fetch_page(self) -> str:
        """Return the raw HTML of the rate page, unwrapped from the proxy envelope."""

        url = self.url
        LOGGER.info("Fetching exchange rate page via %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise NetworkError(f"Unable to fetch {self.source_url}: {exc}") from exc
        except ValueError as exc:
            raise NetworkError(f"Proxy returned malformed JSON for {self.source_url}") from exc
        if not isinstance(payload, dict):
            raise NetworkError("Proxy envelope is not a JSON object")
        contents = payload.get("contents")
        if not isinstance(contents, str):
            raise NetworkError("Proxy envelope has no 'contents' field")
        return contents

    def fetch_rate(self) -> int:
        html = self.fetch_page()
        if self.extractor is not None:
            return self.extractor(html)
        return parse_bca_rate(html, currency=self.currency)


__all__ = ["RATE_COLUMN_INDEX", "BCARateProvider", "build_proxy_url", "parse_bca_rate"]
