from affilink.conversion.base import BaseConverter
from affilink.conversion.converter import LinkConverter
from affilink.conversion.exceptions import (
    ConversionError,
    EmptyInputError,
    NotMarketplaceURLError,
    UnparseableURLError,
    UnsupportedShortLinkError,
)
from affilink.conversion.factory import ConverterFactory
from affilink.conversion.models import CleanLink, ConversionResult, ConverterConfig, FallbackLink

__all__ = [
    "BaseConverter",
    "CleanLink",
    "ConversionError",
    "ConversionResult",
    "ConverterConfig",
    "ConverterFactory",
    "EmptyInputError",
    "FallbackLink",
    "LinkConverter",
    "NotMarketplaceURLError",
    "UnparseableURLError",
    "UnsupportedShortLinkError",
]
