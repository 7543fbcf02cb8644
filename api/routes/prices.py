from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_price_service
from api.schemas import (
	CurrenciesResponse,
	CurrencyResponse,
	PricesResponse,
	RefreshResponse,
	SwapRequest,
	SwapResponse,
)
from application.services import PriceService

router = APIRouter(prefix='/api', tags=['prices'])


@router.get(
	'/currencies',
	response_model=CurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List currencies available for swapping',
)
async def get_currencies(
	service: Annotated[PriceService, Depends(get_price_service)],
) -> CurrenciesResponse:
	currencies = [
		CurrencyResponse(currency=meta.currency, icon_url=meta.icon_url)
		for meta in service.snapshot.currencies
	]
	return CurrenciesResponse(currencies=currencies)


@router.get(
	'/prices',
	response_model=PricesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the current rate table',
)
async def get_prices(
	service: Annotated[PriceService, Depends(get_price_service)],
) -> PricesResponse:
	snapshot = service.snapshot
	return PricesResponse(rates=dict(snapshot.rates), fetched_at=snapshot.fetched_at)


@router.post(
	'/prices/refresh',
	response_model=RefreshResponse,
	status_code=status.HTTP_200_OK,
	summary='Reload the price list',
)
async def refresh_prices(
	service: Annotated[PriceService, Depends(get_price_service)],
) -> RefreshResponse:
	snapshot = await service.refresh()
	return RefreshResponse(currency_count=len(snapshot.rates), fetched_at=snapshot.fetched_at)


@router.post(
	'/convert',
	response_model=SwapResponse,
	status_code=status.HTTP_200_OK,
	summary='Compute the indicative amount to receive',
)
async def convert_amount(
	payload: SwapRequest,
	service: Annotated[PriceService, Depends(get_price_service)],
) -> SwapResponse:
	result = service.compute(payload.to_domain())
	if result is None:
		return SwapResponse(to_amount=payload.previous_result, updated=False)
	return SwapResponse(to_amount=result, updated=True)
