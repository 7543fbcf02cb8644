class PriceException(Exception):
    pass


class ProviderError(PriceException):
    pass
