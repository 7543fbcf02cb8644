from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CurrencyResponse(BaseModel):
	currency: str = Field(..., description='Currency symbol')
	icon_url: str = Field(..., description='Token icon location')


class CurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Priced currencies in first-seen order')

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [
				{
					'currencies': [
						{
							'currency': 'STEVMOS',
							'icon_url': 'https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens/stEVMos.svg',
						}
					]
				}
			]
		}
	)


class PricesResponse(BaseModel):
	rates: dict[str, float] = Field(..., description='USD-equivalent price per currency')
	fetched_at: datetime | None = Field(None, description='When the price list was loaded')


class SwapResponse(BaseModel):
	to_amount: str | None = Field(None, description='Amount to receive, fixed to 6 decimals')
	updated: bool = Field(..., description='Whether the amount was recomputed')

	model_config = ConfigDict(json_schema_extra={'example': {'to_amount': '5.000000', 'updated': True}})


class RefreshResponse(BaseModel):
	currency_count: int
	fetched_at: datetime | None
