from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

# currency symbol -> USD-equivalent price, read-only once built
RateTable = Mapping[str, float]

EMPTY_RATES: RateTable = MappingProxyType({})


@dataclass(frozen=True)
class PriceObservation:
    currency: str
    date: str | None = None
    price: float | str | None = None

    @property
    def dedup_key(self) -> str:
        return f"{self.currency}-{self.date}"

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PriceObservation":
        return cls(
            currency=raw["currency"],
            date=raw.get("date"),
            price=raw.get("price"),
        )


@dataclass(frozen=True)
class CurrencyMeta:
    currency: str
    icon_url: str


@dataclass(frozen=True)
class ConversionRequest:
    from_currency: str | None = None
    to_currency: str | None = None
    from_amount: str = ""


@dataclass(frozen=True)
class PriceSnapshot:
    rates: RateTable = field(default_factory=lambda: EMPTY_RATES)
    currencies: tuple[CurrencyMeta, ...] = ()
    fetched_at: datetime | None = None  # None until the first refresh
