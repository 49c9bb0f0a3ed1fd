from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ConverterConfig:
    """Immutable values the converter reads on every call."""

    affiliate_tag: str
    tracking_params: tuple[str, ...]
    tracking_param_suffix_count: int = 10


@dataclass(frozen=True)
class CleanLink:
    """An ASIN was found; url is the minimal product page link."""

    kind: ClassVar[str] = "clean"
    label: ClassVar[str] = "Clean link ready"

    url: str
    asin: str

    def to_dict(self) -> dict[str, str | None]:
        return {"url": self.url, "type": self.kind, "asin": self.asin}


@dataclass(frozen=True)
class FallbackLink:
    """No ASIN was found; url is the original link minus tracking parameters."""

    kind: ClassVar[str] = "fallback"
    label: ClassVar[str] = "Link ready (search/category page)"

    url: str

    def to_dict(self) -> dict[str, str | None]:
        return {"url": self.url, "type": self.kind, "asin": None}


ConversionResult = CleanLink | FallbackLink
