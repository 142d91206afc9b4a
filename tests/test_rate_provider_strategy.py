from __future__ import annotations

from kurs_pricing.ingestion.bca import BCARateProvider
from kurs_pricing.ingestion.strategy import RateExtractor, RateProvider


class _FixedProvider:
    def fetch_rate(self) -> int:
        return 16000


class _Session:
    def __init__(self) -> None:
        self.headers: dict[str, str] = {}

    def get(self, url: str, timeout: float):  # type: ignore[no-untyped-def]
        class _Response:
            def raise_for_status(self) -> None:
                return None

            def json(self) -> dict[str, str]:
                return {"contents": "rate=15990"}

        return _Response()


def test_rate_provider_contract() -> None:
    provider: RateProvider = _FixedProvider()

    assert provider.fetch_rate() == 16000


def test_bca_provider_accepts_any_extractor() -> None:
    def _extract(document: str) -> int:
        return int(document.partition("=")[2])

    extractor: RateExtractor = _extract
    provider: RateProvider = BCARateProvider(session=_Session(), extractor=extractor)  # type: ignore[arg-type]

    assert provider.fetch_rate() == 15990
