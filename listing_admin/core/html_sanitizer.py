from __future__ import annotations

import re

import bleach
from bleach.css_sanitizer import CSSSanitizer


_DATA_IMAGE_PATTERN = re.compile(
    r"^data:image/(png|jpe?g|gif|webp);base64,[a-z0-9+/=\s]+$",
    re.IGNORECASE,
)

_DROP_BLOCK_TAG_RE = re.compile(r"(?is)<(script|style|iframe)[^>]*>.*?</\1>")

# Output of the description editor (formatBlock, lists, colors, images, links).
_ALLOWED_TAGS = [
    "p",
    "div",
    "span",
    "br",
    "h1",
    "h2",
    "h3",
    "h4",
    "blockquote",
    "pre",
    "b",
    "strong",
    "i",
    "em",
    "u",
    "s",
    "strike",
    "ul",
    "ol",
    "li",
    "font",
    "img",
    "a",
]

_BLOCK_TAGS = {"p", "div", "h1", "h2", "h3", "h4", "blockquote", "pre", "ul", "ol", "li"}

_ALLOWED_CSS_PROPERTIES = [
    "text-align",
    "direction",
    "color",
    "background-color",
    "font-size",
    "font-weight",
    "font-style",
    "text-decoration",
    "margin-right",
    "margin-left",
    "padding-right",
    "padding-left",
]

_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=_ALLOWED_CSS_PROPERTIES)


def _filter_attribute(tag: str, name: str, value: str) -> bool:
    tag = (tag or "").lower()
    name = (name or "").lower()
    lowered_value = (value or "").strip().lower()

    if name.startswith("on"):
        return False

    if name == "dir":
        return lowered_value in {"rtl", "ltr", "auto"}

    if tag == "img":
        if name in {"alt", "title", "width", "height"}:
            return True
        if name != "src":
            return False
        if lowered_value.startswith("data:"):
            return bool(_DATA_IMAGE_PATTERN.match(lowered_value))
        return lowered_value.startswith(("http://", "https://", "/"))

    if tag == "a":
        if name in {"title", "target", "rel"}:
            return True
        return name == "href" and not lowered_value.startswith(("data:", "javascript:"))

    if tag == "font":
        return name in {"color", "size", "face"}

    if name == "style":
        return tag == "span" or tag in _BLOCK_TAGS

    if name == "align":
        return tag in _BLOCK_TAGS and lowered_value in {"left", "center", "right", "justify"}

    return False


_CLEANER = bleach.Cleaner(
    tags=_ALLOWED_TAGS,
    attributes=_filter_attribute,
    protocols=["http", "https", "mailto", "tel", "data"],
    strip=True,
    strip_comments=True,
    css_sanitizer=_CSS_SANITIZER,
)


def sanitize_rich_text_html(value) -> str:  # noqa: ANN001
    if not isinstance(value, str):
        return ""
    raw = value.strip()
    if not raw:
        return ""
    raw = _DROP_BLOCK_TAG_RE.sub("", raw)
    return _CLEANER.clean(raw)
