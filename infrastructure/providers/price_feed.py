import logging

import httpx

from domain.exceptions.price import ProviderError
from domain.models.price import PriceObservation

logger = logging.getLogger(__name__)

DEFAULT_PRICES_URL = 'https://interview.switcheo.com/prices.json'


class PriceFeedProvider:
	def __init__(
		self,
		prices_url: str = DEFAULT_PRICES_URL,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.prices_url = prices_url
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'price_feed'

	async def _request(self) -> list:
		try:
			response = await self._client.get(self.prices_url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'Price feed HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'Price feed request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'Price feed response parsing error: {str(e)}') from e

		if not isinstance(data, list):
			raise ProviderError(f'Price feed returned {type(data).__name__}, expected a list')
		return data

	async def fetch_observations(self) -> list[PriceObservation]:
		data = await self._request()

		observations = []
		for item in data:
			if not isinstance(item, dict) or not isinstance(item.get('currency'), str):
				logger.warning(f'Skipping malformed price entry: {item!r}')
				continue
			observations.append(PriceObservation.from_dict(item))

		logger.info(f'Fetched {len(observations)} price observations from {self.prices_url}')
		return observations

	async def close(self) -> None:
		await self._client.aclose()
