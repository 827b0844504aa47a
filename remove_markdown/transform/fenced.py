"""Extracts the contents of ``` fenced code blocks."""

from __future__ import annotations

import re

from remove_markdown.config.models import RemoveMarkdownOptions

from .pipeline import Stage

# Opening fence with optional info string, lazy body, closing fence
_FENCED_BLOCK_RE = re.compile(r"```(?:.*)\n([\s\S]*?)```")


def extract_fenced_blocks(text: str) -> str:
    """Replace each fenced block, fences and language tag included, with its trimmed body.

    Matches are found against the original text and spliced into a working
    copy; ``offset`` tracks how far earlier replacements have shifted later
    match coordinates.
    """
    result = text
    offset = 0
    for m in _FENCED_BLOCK_RE.finditer(text):
        code = m.group(1).strip()
        start = m.start() + offset
        end = m.end() + offset
        result = result[:start] + code + result[end:]
        offset += len(code) - (m.end() - m.start())
    return result


class FencedCodeExtractor(Stage):
    name = "gfm_fenced_code"

    def enabled(self, options: RemoveMarkdownOptions) -> bool:
        return options.gfm_extensions

    def apply(self, text: str, options: RemoveMarkdownOptions) -> str:
        return extract_fenced_blocks(text)
