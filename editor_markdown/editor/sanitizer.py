"""Allowlist sanitizer for Matrix custom HTML.

Wraps nh3 with the tags and attributes a Matrix message body may carry,
including the ``data-md`` marker written by the markdown rule engines.
Everything else is stripped before the HTML reaches the converter.
"""

import logging
from typing import Dict, Optional, Set

import nh3

logger = logging.getLogger(__name__)

PERMITTED_HTML_TAGS: Set[str] = {
    "font",
    "del",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "blockquote",
    "p",
    "a",
    "ul",
    "ol",
    "sup",
    "sub",
    "li",
    "b",
    "i",
    "u",
    "strong",
    "em",
    "strike",
    "s",
    "code",
    "hr",
    "br",
    "div",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    "caption",
    "pre",
    "span",
    "img",
    "details",
    "summary",
}

_MD = "data-md"

PERMITTED_TAG_TO_ATTRIBUTES: Dict[str, Set[str]] = {
    "font": {"style", "data-mx-bg-color", "data-mx-color", "color"},
    "span": {
        "style",
        "data-mx-bg-color",
        "data-mx-color",
        "data-mx-spoiler",
        "data-mx-maths",
        "data-mx-pill",
        "data-mx-ping",
        _MD,
    },
    "div": {"data-mx-maths"},
    "blockquote": {_MD},
    "h1": {_MD},
    "h2": {_MD},
    "h3": {_MD},
    "h4": {_MD},
    "h5": {_MD},
    "h6": {_MD},
    "pre": {_MD},
    "ol": {"start", "type", _MD},
    "ul": {_MD},
    "a": {"name", "target", "href", _MD},
    "img": {"width", "height", "alt", "title", "src", "data-mx-emoticon"},
    "code": {"class", _MD},
    "strong": {_MD},
    "i": {_MD},
    "em": {_MD},
    "u": {_MD},
    "s": {_MD},
    "del": {_MD},
    "b": {_MD},
}

PERMITTED_URL_SCHEMES: Set[str] = {
    "https",
    "http",
    "ftp",
    "mailto",
    "magnet",
    "matrix",
    "mxc",
}


def _filter_attribute(tag: str, attr: str, value: str) -> Optional[str]:
    """Keep only language classes on code elements."""
    if tag == "code" and attr == "class":
        classes = [cls for cls in value.split() if cls.startswith("language-")]
        return " ".join(classes) if classes else None
    return value


def sanitize_custom_html(html: str) -> str:
    """Strip everything outside the Matrix custom HTML allowlist.

    Args:
        html: Untrusted HTML

    Returns:
        Sanitized HTML
    """
    sanitized = nh3.clean(
        html,
        tags=PERMITTED_HTML_TAGS,
        attributes=PERMITTED_TAG_TO_ATTRIBUTES,
        attribute_filter=_filter_attribute,
        url_schemes=PERMITTED_URL_SCHEMES,
        strip_comments=True,
        link_rel=None,
    )
    logger.debug(f"Sanitized HTML: {len(html)} → {len(sanitized)} chars")
    return sanitized
