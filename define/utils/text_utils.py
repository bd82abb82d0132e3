"""Text cleanup helpers for upstream dictionary content."""

import html
import re

# {dx}see also ...{/dx} cross-reference blocks
_CROSS_REFERENCE = re.compile(r"\{dx\}.*?\{/dx\}")
# {sx|word||}, {a_link|word}, {d_link|word|id} and friends keep their first field
_LINK_TOKEN = re.compile(r"\{(?:sx|a_link|d_link|i_link|et_link|mat|dxt)\|([^|}]*)[^}]*\}")
_QUOTE_TOKEN = re.compile(r"\{[lr]dquo\}")
_ANY_TOKEN = re.compile(r"\{[^}]*\}")


def clean_text(text: str) -> str:
    """Unescape HTML entities and collapse whitespace.

    Args:
        text: Raw text from an API response

    Returns:
        Cleaned single-line text
    """
    return " ".join(html.unescape(text).split())


def strip_markup(text: str) -> str:
    """Remove Merriam-Webster style formatting tokens.

    Args:
        text: Text containing tokens like ``{bc}`` or ``{it}word{/it}``

    Returns:
        Plain text with link tokens replaced by their display word

    Example:
        >>> strip_markup("{bc}a {it}round{/it} {sx|ball||}")
        'a round ball'
    """
    text = _CROSS_REFERENCE.sub("", text)
    text = _LINK_TOKEN.sub(r"\1", text)
    text = _QUOTE_TOKEN.sub('"', text)
    text = _ANY_TOKEN.sub("", text)
    return clean_text(text)
