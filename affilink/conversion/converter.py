"""Amazon link normalizer."""

from affilink.conversion.asin import extract_asin
from affilink.conversion.base import BaseConverter
from affilink.conversion.domain import (
    CANONICAL_ORIGIN,
    canonicalize_domain,
    ensure_scheme,
    is_marketplace_url,
    is_short_link,
)
from affilink.conversion.exceptions import (
    EmptyInputError,
    NotMarketplaceURLError,
    UnsupportedShortLinkError,
)
from affilink.conversion.models import CleanLink, ConversionResult, ConverterConfig, FallbackLink
from affilink.conversion.tracking import blocked_params, retag_url, tag_pair


class LinkConverter(BaseConverter):
    """Rewrites Amazon links into canonical affiliate links.

    Pure: no I/O and no logging, so instances can be shared freely.
    """

    def __init__(self, config: ConverterConfig) -> None:
        self._config = config
        self._blocked = blocked_params(config)

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def convert(self, raw: str) -> ConversionResult:
        url = raw.strip()
        if not url:
            raise EmptyInputError()

        url = ensure_scheme(url)
        if is_short_link(url):
            raise UnsupportedShortLinkError()
        if not is_marketplace_url(url):
            raise NotMarketplaceURLError()

        url = canonicalize_domain(url)
        asin = extract_asin(url)
        if asin:
            return CleanLink(
                url=f"{CANONICAL_ORIGIN}/dp/{asin}?{tag_pair(self._config.affiliate_tag)}",
                asin=asin,
            )
        return FallbackLink(url=retag_url(url, self._config, self._blocked))
