"""Strips HTML tags, keeping any listed in the preserve-list."""

from __future__ import annotations

import re

from remove_markdown.config.models import RemoveMarkdownOptions

from .pipeline import Stage
from .substitution import substitute

_ANY_TAG = r"<[^>]*>"


def build_html_pattern(preserve: tuple[str, ...] | list[str]) -> str:
    """Pattern matching every tag except opening/closing/void forms of ``preserve``.

    Tag names are escaped and embedded as literal alternatives. A name only
    counts when followed by ``>``, ``/>`` or whitespace, so preserving
    ``sub`` does not preserve ``<subway>``.
    """
    names = [re.escape(tag) for tag in preserve if tag]
    if not names:
        return _ANY_TAG
    joined = "|".join(names)
    return rf"<(?!/?(?:{joined})(?=\s*/?>|\s[^>]*>))[^>]*>"


class HtmlTagStripper(Stage):
    name = "html_tags"

    def apply(self, text: str, options: RemoveMarkdownOptions) -> str:
        pattern = build_html_pattern(options.html_tags_to_preserve)
        return substitute(text, pattern, "")
