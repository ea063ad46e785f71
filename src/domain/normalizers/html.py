"""HTML sanitization for rich-text fields, backed by nh3."""

import html
import re
from typing import Any

import nh3

_LOOKS_LIKE_HTML = re.compile(r"</?[a-z][^>]*>", re.IGNORECASE)

RICH_TEXT_TAGS = {
    "p",
    "br",
    "strong",
    "em",
    "u",
    "s",
    "h1",
    "h2",
    "h3",
    "ul",
    "ol",
    "li",
    "blockquote",
    "a",
    "img",
}
RICH_TEXT_ATTRIBUTES = {
    "a": {"href"},
    "img": {"src", "alt", "title"},
}
RICH_TEXT_SCHEMES = {"http", "https", "mailto", "tel"}

MESSAGE_TAGS = {"p", "br", "strong", "em", "u", "ul", "ol", "li", "a"}
MESSAGE_ATTRIBUTES = {"a": {"href"}}
MESSAGE_SCHEMES = {"http", "https", "mailto"}

LINK_REL = "noopener noreferrer"
LINK_TARGET = {"a": {"target": "_blank"}}


def sanitize_rich_html(value: Any) -> str:
    """Sanitize editor output (bio, project description)."""
    raw = value if isinstance(value, str) else ""
    if not raw.strip():
        return ""
    return nh3.clean(
        raw,
        tags=RICH_TEXT_TAGS,
        attributes=RICH_TEXT_ATTRIBUTES,
        url_schemes=RICH_TEXT_SCHEMES,
        link_rel=LINK_REL,
        set_tag_attribute_values=LINK_TARGET,
    ).strip()


def sanitize_message_html(value: Any) -> str:
    """Sanitize contact form HTML with a narrower allow-list (no images, no headings)."""
    raw = value if isinstance(value, str) else ""
    if not raw.strip():
        return ""
    return nh3.clean(
        raw,
        tags=MESSAGE_TAGS,
        attributes=MESSAGE_ATTRIBUTES,
        url_schemes=MESSAGE_SCHEMES,
        link_rel=LINK_REL,
        set_tag_attribute_values=LINK_TARGET,
    ).strip()


def looks_like_html(value: str) -> bool:
    return bool(_LOOKS_LIKE_HTML.search(value))


def normalize_text_whitespace(value: str) -> str:
    text = value.replace("\r\n", "\n")
    text = re.sub(r"[ \t]+\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def plain_text_to_html(value: str) -> str:
    """Escape plain text and split it into ``<p>`` paragraphs on blank lines."""
    text = normalize_text_whitespace(value)
    if not text:
        return ""
    escaped = html.escape(text, quote=True)
    paragraphs = re.split(r"\n{2,}", escaped)
    return "".join(f"<p>{paragraph.replace(chr(10), '<br />')}</p>" for paragraph in paragraphs)


def coerce_legacy_html(value: Any) -> str:
    """Accept either editor HTML or a legacy plain-text bio and return sanitized HTML."""
    raw = value.replace("\r\n", "\n").strip() if isinstance(value, str) else ""
    if not raw:
        return ""
    if looks_like_html(raw):
        sanitized = sanitize_rich_html(raw)
        if not sanitized or looks_like_html(sanitized):
            return sanitized
        # Every tag was stripped; what is left is escaped text.
        raw = html.unescape(sanitized)
    return sanitize_rich_html(plain_text_to_html(raw))


def html_to_text(value: str) -> str:
    """Flatten sanitized HTML into readable plain text for email bodies."""
    with_breaks = re.sub(r"<br\s*/?>", "\n", value, flags=re.IGNORECASE)
    with_breaks = re.sub(r"<li>", "- ", with_breaks, flags=re.IGNORECASE)
    with_breaks = re.sub(r"</li>", "\n", with_breaks, flags=re.IGNORECASE)
    with_breaks = re.sub(
        r"</(p|div|ul|ol|blockquote|h[1-6])>", "\n", with_breaks, flags=re.IGNORECASE
    )
    stripped = nh3.clean(with_breaks, tags=set(), attributes={})
    return normalize_text_whitespace(html.unescape(stripped).replace("\xa0", " "))


def find_img_sources(value: Any) -> list[str]:
    """Return the ``src`` of every ``<img>`` in an HTML fragment."""
    if not isinstance(value, str) or not value:
        return []
    return re.findall(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>", value, flags=re.IGNORECASE)
