from pydantic import BaseModel, ConfigDict, Field

from domain.models.price import ConversionRequest


class SwapRequest(BaseModel):
	from_currency: str | None = Field(None, description='Currency being sent')
	to_currency: str | None = Field(None, description='Currency being received')
	from_amount: str = Field('', description='Amount to send, as typed by the user')
	previous_result: str | None = Field(None, description='Amount currently on display')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'ETH',
				'to_currency': 'USDC',
				'from_amount': '1.5',
				'previous_result': None,
			}
		}
	)

	def to_domain(self) -> ConversionRequest:
		return ConversionRequest(
			from_currency=self.from_currency,
			to_currency=self.to_currency,
			from_amount=self.from_amount,
		)
