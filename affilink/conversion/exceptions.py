class ConversionError(Exception):
    """Raised when a link cannot be converted. The message is user-facing."""


class EmptyInputError(ConversionError):
    """Raised when the input is blank after trimming."""

    def __init__(self, message: str = "Please paste an Amazon link") -> None:
        super().__init__(message)


class NotMarketplaceURLError(ConversionError):
    """Raised when the input does not reference Amazon at all."""

    def __init__(self, message: str = "That doesn't look like an Amazon link") -> None:
        super().__init__(message)


class UnsupportedShortLinkError(ConversionError):
    """Raised for short links that would need a network hop to resolve."""

    def __init__(
        self,
        message: str = "Short links (amzn.to) aren't supported, use the full Amazon URL",
    ) -> None:
        super().__init__(message)


class UnparseableURLError(ConversionError):
    """Raised when the fallback path cannot parse the canonicalized URL."""

    def __init__(self, message: str = "Couldn't parse that URL") -> None:
        super().__init__(message)
