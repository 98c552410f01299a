"""Response post-processing: count/value envelopes and HTML error pages.

Many list endpoints answer with {"count": N, "value": [...]}; callers want
the list. A response that is really an HTML page (login redirect, proxy
error) is reported as a failure for that item instead of being returned.
"""

from enum import Enum
from typing import Any, Iterator

HTML_MARKER = "<html"


class ResponseKind(str, Enum):
    ENVELOPE = "envelope"
    HTML = "html"
    VALUE = "value"


def is_envelope(value: Any) -> bool:
    return isinstance(value, dict) and bool(value.get("value")) and bool(value.get("count"))


def as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def looks_like_html(value: Any) -> bool:
    """Substring sniff for '<html', case-insensitive. Not a structural check."""
    return HTML_MARKER in as_text(value).lower()


def classify(value: Any) -> ResponseKind:
    """Envelope first, then HTML, else plain value.

    The order matters: an envelope whose items contain HTML is still an
    envelope; its items are sniffed one by one after unwrapping.
    """
    if is_envelope(value):
        return ResponseKind.ENVELOPE
    if looks_like_html(value):
        return ResponseKind.HTML
    return ResponseKind.VALUE


def unwrap(value: Any) -> Any:
    if classify(value) is ResponseKind.ENVELOPE:
        return value["value"]
    return value


def iter_items(value: Any) -> Iterator[Any]:
    """Lists yield their elements, anything else yields itself."""
    if isinstance(value, list):
        yield from value
    else:
        yield value
