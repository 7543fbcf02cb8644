import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal

from domain.models.price import ConversionRequest, RateTable
from domain.utils.amount import parse_amount

logger = logging.getLogger(__name__)

RESULT_DECIMALS = 6

# Wide enough to quantize any finite float without overflow
_FIXED_CONTEXT = Context(prec=400)


def format_fixed(value: float, digits: int = RESULT_DECIMALS) -> str:
	if math.isnan(value):
		return 'NaN'
	if math.isinf(value):
		return 'Infinity' if value > 0 else '-Infinity'
	if abs(value) >= 1e21:
		return repr(value)
	if value == 0:
		value = 0.0
	quantum = Decimal(1).scaleb(-digits)
	fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
	return f'{fixed:f}'


class ConversionEngine:
	"""Computes an indicative swap amount from a rate table.

	The result only moves when every input needed for it is present. Any
	missing rate, blank amount or non-finite outcome hands back
	``previous_result`` untouched.
	"""

	def __init__(self, decimals: int = RESULT_DECIMALS):
		self.decimals = decimals

	def compute(self, request: ConversionRequest, rates: RateTable) -> str | None:
		"""Return the converted amount, or None when the update is withheld."""
		from_currency = request.from_currency
		to_currency = request.to_currency
		if not from_currency or not to_currency:
			return None

		from_rate = rates.get(from_currency) or 0
		to_rate = rates.get(to_currency)

		if not from_rate or not to_rate or not request.from_amount:
			logger.debug(
				f'Conversion withheld: from_rate={from_rate} to_rate={to_rate} '
				f'amount={request.from_amount!r}'
			)
			return None

		amount_in_base = parse_amount(request.from_amount) * from_rate
		candidate = amount_in_base / to_rate

		if not math.isfinite(candidate):
			logger.debug(f'Conversion withheld: amount {request.from_amount!r} is not numeric')
			return None

		return format_fixed(candidate, self.decimals)

	def convert(
		self,
		request: ConversionRequest,
		rates: RateTable,
		previous_result: str | None = None,
	) -> str | None:
		candidate = self.compute(request, rates)
		return previous_result if candidate is None else candidate
