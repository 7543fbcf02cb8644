import logging
import math
from collections.abc import Iterable
from types import MappingProxyType

from domain.models.price import CurrencyMeta, PriceObservation, RateTable
from domain.utils.amount import parse_amount

logger = logging.getLogger(__name__)

DEFAULT_ICON_BASE_URL = 'https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens'

# Display tickers whose icon file uses different casing
ICON_OVERRIDES: dict[str, str] = {
	'STEVMOS': 'stEVMos',
	'RATOM': 'rATOM',
	'STOSMO': 'stOSMO',
	'STATOM': 'stATOM',
	'STLUNA': 'stLUNA',
}


def coerce_price(price: object) -> float | None:
	"""Return a usable positive rate for ``price`` or None."""
	if price is None or isinstance(price, bool):
		return None
	if isinstance(price, int | float):
		value = float(price)
	elif isinstance(price, str):
		value = parse_amount(price)
	else:
		return None

	if not math.isfinite(value) or value <= 0:
		return None
	return value


class PriceCatalog:
	def __init__(
		self,
		icon_base_url: str = DEFAULT_ICON_BASE_URL,
		icon_overrides: dict[str, str] | None = None,
	):
		self.icon_base_url = icon_base_url.rstrip('/')
		self.icon_overrides = ICON_OVERRIDES if icon_overrides is None else icon_overrides

	def icon_url(self, currency: str) -> str:
		icon_name = self.icon_overrides.get(currency, currency)
		return f'{self.icon_base_url}/{icon_name}.svg'

	@staticmethod
	def deduplicate(observations: Iterable[PriceObservation]) -> list[PriceObservation]:
		"""Keep the first observation for each (currency, date) pair, in input order."""
		unique: dict[str, PriceObservation] = {}
		for observation in observations:
			unique.setdefault(observation.dedup_key, observation)
		return list(unique.values())

	def normalize(
		self, observations: Iterable[PriceObservation]
	) -> tuple[RateTable, list[CurrencyMeta]]:
		observations = list(observations)
		unique = self.deduplicate(observations)

		rates: dict[str, float] = {}
		currencies: list[CurrencyMeta] = []
		unpriced = 0

		for observation in unique:
			price = coerce_price(observation.price)
			if price is None:
				unpriced += 1
				continue
			# an earlier date already set this currency's rate
			if observation.currency in rates:
				continue

			rates[observation.currency] = price
			currencies.append(
				CurrencyMeta(currency=observation.currency, icon_url=self.icon_url(observation.currency))
			)

		logger.debug(
			f'Normalized {len(observations)} observations: '
			f'{len(observations) - len(unique)} duplicates dropped, '
			f'{unpriced} without a usable price, {len(rates)} currencies priced'
		)
		return MappingProxyType(rates), currencies
