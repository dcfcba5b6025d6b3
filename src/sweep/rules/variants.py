"""Stage URL variants.

The draft rendering of a page is served from the same path with a
``stage=Stage`` query parameter, so it is cached under its own key and must
be purged separately from the live URL.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit

STAGE_PARAM = "stage"
STAGE_VALUE = "Stage"


def to_stage_variant(url: str, *, param: str = STAGE_PARAM, value: str = STAGE_VALUE) -> str:
    """Return the draft variant of *url*.

    Existing query parameters keep their order.  An existing *param* is
    overwritten in place, a missing one is appended, so applying this twice
    gives the same result as applying it once.  Only the path and query
    survive; a URL with an empty path yields ``"?stage=Stage"``.

    Example:
        >>> to_stage_variant("/news?foo=bar")
        '/news?foo=bar&stage=Stage'

    """
    parts = urlsplit(url)
    # Later duplicates win but keep the position of the first occurrence.
    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    params[param] = value
    return f"{parts.path}?{urlencode(params)}"
