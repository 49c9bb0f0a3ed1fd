"""Marketplace recognition and host canonicalization."""

import re

CANONICAL_ORIGIN = "https://www.amazon.com"
MARKETPLACE_ROOT = "amazon."
SHORT_LINK_HOSTS: tuple[str, ...] = ("amzn.to", "amzn.com")

_REGIONAL_TLDS = (
    "co.uk", "de", "fr", "es", "it", "ca", "com.au", "co.jp", "in",
    "com.mx", "com.br", "nl", "se", "pl", "sg", "ae", "sa", "eg", "tr",
)

# The TLD must close the host, otherwise "amazon.com.au" half-matches ".com".
_HOST_END = r"(?=[/?#:]|$)"
_PREFIX = r"^(?:https?://)?(?:(?:www|smile|m)\.)?amazon\."

DOMAIN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(_PREFIX + r"com" + _HOST_END, re.IGNORECASE), CANONICAL_ORIGIN),
    (
        re.compile(
            _PREFIX
            + "(?:"
            + "|".join(re.escape(tld) for tld in _REGIONAL_TLDS)
            + ")"
            + _HOST_END,
            re.IGNORECASE,
        ),
        CANONICAL_ORIGIN,
    ),
)


def ensure_scheme(url: str) -> str:
    if url.lower().startswith(("http://", "https://")):
        return url
    return "https://" + url


def is_short_link(url: str) -> bool:
    lowered = url.lower()
    return any(host in lowered for host in SHORT_LINK_HOSTS)


def is_marketplace_url(url: str) -> bool:
    return MARKETPLACE_ROOT in url.lower()


def canonicalize_domain(url: str) -> str:
    """Rewrite regional, mobile and smile hosts to the canonical origin.

    Every rule is applied in order; a URL no rule matches is returned as is.
    """
    for pattern, replacement in DOMAIN_RULES:
        url = pattern.sub(replacement, url, count=1)
    return url
