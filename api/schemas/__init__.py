from .requests import SwapRequest
from .responses import (
	CurrenciesResponse,
	CurrencyResponse,
	PricesResponse,
	RefreshResponse,
	SwapResponse,
)

__all__ = [
	'CurrenciesResponse',
	'CurrencyResponse',
	'PricesResponse',
	'RefreshResponse',
	'SwapRequest',
	'SwapResponse',
]
