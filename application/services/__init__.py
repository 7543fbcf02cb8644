from .conversion_engine import ConversionEngine
from .price_catalog import PriceCatalog
from .price_service import PriceService

__all__ = ['ConversionEngine', 'PriceCatalog', 'PriceService']
