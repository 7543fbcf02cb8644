import logging

from application.services import ConversionEngine, PriceCatalog, PriceService
from config.settings import get_settings
from infrastructure.providers import PriceFeedProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: PriceFeedProvider | None = None
	price_service: PriceService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = PriceFeedProvider(settings.PRICES_URL, timeout=settings.PRICE_FEED_TIMEOUT)
	deps.price_service = PriceService(
		provider=deps.provider,
		catalog=PriceCatalog(icon_base_url=settings.ICON_BASE_URL),
		engine=ConversionEngine(),
		max_attempts=settings.PRICE_FEED_MAX_ATTEMPTS,
		retry_wait=settings.PRICE_FEED_RETRY_WAIT,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()

	logger.info('Cleanup complete')


async def bootstrap() -> None:
	"""Load the price list once. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.price_service is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	await deps.price_service.refresh()

	logger.info('Bootstrap complete')


def get_price_service() -> PriceService:
	if deps.price_service is None:
		raise RuntimeError('Price service not initialized')
	return deps.price_service
