from urllib.parse import quote_plus, unquote_plus, urlsplit, urlunsplit

from affilink.conversion.exceptions import UnparseableURLError
from affilink.conversion.models import ConverterConfig

TAG_PARAM = "tag"


def blocked_params(config: ConverterConfig) -> frozenset[str]:
    """Tracking names plus their numerically suffixed variants (ref0, ref1, ...)."""
    names: set[str] = set()
    for name in config.tracking_params:
        names.add(name)
        names.update(f"{name}{i}" for i in range(config.tracking_param_suffix_count))
    return frozenset(names)


def tag_pair(affiliate_tag: str) -> str:
    return f"{TAG_PARAM}={quote_plus(affiliate_tag)}"


def retag_url(url: str, config: ConverterConfig, blocked: frozenset[str]) -> str:
    """Drop blocked query parameters and set the affiliate tag.

    Pairs are matched on their decoded name but kept byte for byte, so a
    second pass over the output changes nothing. The tag always goes last.
    """
    try:
        parts = urlsplit(url)
        _ = parts.port
    except ValueError as exc:
        raise UnparseableURLError() from exc
    if not parts.hostname:
        raise UnparseableURLError()

    kept = []
    for pair in parts.query.split("&"):
        if not pair:
            continue
        name = unquote_plus(pair.split("=", 1)[0])
        if name in blocked or name == TAG_PARAM:
            continue
        kept.append(pair)
    kept.append(tag_pair(config.affiliate_tag))

    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path or "/", "&".join(kept), parts.fragment)
    )
