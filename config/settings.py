from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	PRICES_URL: str = 'https://interview.switcheo.com/prices.json'
	ICON_BASE_URL: str = 'https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens'

	PRICE_FEED_TIMEOUT: int = 10
	PRICE_FEED_MAX_ATTEMPTS: int = 3
	PRICE_FEED_RETRY_WAIT: float = 1.0

	# Application
	APP_NAME: str = 'Currency Swap API'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
