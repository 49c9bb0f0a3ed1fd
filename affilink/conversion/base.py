from abc import ABC, abstractmethod

from affilink.conversion.models import ConversionResult


class BaseConverter(ABC):
    """Contract for all link converters."""

    @abstractmethod
    def convert(self, raw: str) -> ConversionResult:
        """Turn a pasted link into an affiliate-tagged link.

        Args:
            raw: Whatever the user pasted, possibly blank or without a scheme.

        Returns:
            CleanLink when an ASIN was found, FallbackLink otherwise.

        Raises:
            ConversionError: on any failure.
        """
