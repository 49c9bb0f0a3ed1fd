import re

ASIN_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(prefix + r"([A-Z0-9]{10})", re.IGNORECASE)
    for prefix in (
        r"/dp/",
        r"/gp/product/",
        r"/gp/aw/d/",
        r"/exec/obidos/asin/",
        r"/o/ASIN/",
        r"/product/",
    )
)


def extract_asin(url: str) -> str | None:
    """Return the uppercased ASIN of the first matching path shape, if any."""
    for pattern in ASIN_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1).upper()
    return None
