import logging
from datetime import UTC, datetime

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from application.services.conversion_engine import ConversionEngine
from application.services.price_catalog import PriceCatalog
from domain.exceptions.price import ProviderError
from domain.models.price import ConversionRequest, PriceObservation, PriceSnapshot
from infrastructure.providers.price_feed import PriceFeedProvider

logger = logging.getLogger(__name__)


class PriceService:
    """Owns the current price snapshot and rebuilds it from the price feed.

    A refresh always replaces the whole snapshot in one assignment, so a
    conversion running alongside it sees either the old table or the new
    one, never a mix.
    """

    def __init__(
        self,
        provider: PriceFeedProvider,
        catalog: PriceCatalog | None = None,
        engine: ConversionEngine | None = None,
        max_attempts: int = 3,
        retry_wait: float = 1.0,
    ):
        self.provider = provider
        self.catalog = catalog or PriceCatalog()
        self.engine = engine or ConversionEngine()
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait
        self._snapshot = PriceSnapshot()

    @property
    def snapshot(self) -> PriceSnapshot:
        return self._snapshot

    async def _fetch_observations(self) -> list[PriceObservation]:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.retry_wait, max=10),
            retry=retry_if_exception_type(ProviderError),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await self.provider.fetch_observations()
        except ProviderError as e:
            logger.error(f"Price feed {self.provider.name} failed after {self.max_attempts} attempts: {e}")
        return []

    async def refresh(self) -> PriceSnapshot:
        observations = await self._fetch_observations()
        rates, currencies = self.catalog.normalize(observations)

        self._snapshot = PriceSnapshot(
            rates=rates,
            currencies=tuple(currencies),
            fetched_at=datetime.now(UTC),
        )
        logger.info(f"Price snapshot refreshed with {len(rates)} currencies")
        return self._snapshot

    def compute(self, request: ConversionRequest) -> str | None:
        return self.engine.compute(request, self._snapshot.rates)

    def convert(self, request: ConversionRequest, previous_result: str | None = None) -> str | None:
        snapshot = self._snapshot
        return self.engine.convert(request, snapshot.rates, previous_result)
