from .price_feed import PriceFeedProvider

__all__ = ['PriceFeedProvider']
