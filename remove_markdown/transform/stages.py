"""The fixed, ordered stage table for markdown stripping.

Order matters. Escapes go first so later patterns never see ``\\*``.
Horizontal rules go before list leaders so ``* * *`` is not read as a list
item. With GFM extensions on, fenced blocks are unwrapped early, before the
inline-code pass can eat their fences; with them off a multi-line ``` block
is left to that pass and keeps one backtick per fence line. Headers are
stripped before emphasis so ``##`` is never a delimiter.

Runs of spaces, ``#``, ``_`` and ``*`` are matched possessively (``*+``,
``++``): each run is consumed whole and never re-split.
"""

from __future__ import annotations

import re

from remove_markdown.config.models import RemoveMarkdownOptions

from .fenced import FencedCodeExtractor
from .html import HtmlTagStripper
from .pipeline import RewritePipeline, Stage
from .substitution import Substitution, escape_template

_M = re.MULTILINE


def _list_leader_template(options: RemoveMarkdownOptions) -> str:
    if options.list_unicode_char is not None:
        return escape_template(options.list_unicode_char) + r" \1"
    return r"\1"


def _gfm(options: RemoveMarkdownOptions) -> bool:
    return options.gfm_extensions


STAGES: tuple[Stage, ...] = (
    Substitution("backslash_escapes", r"\\"),
    Substitution(
        "horizontal_rules",
        r"^ {0,3}((?:-[\t ]*){3,}|(?:_[ \t]*){3,}|(?:\*[ \t]*){3,})(?:\n+|$)",
        flags=_M,
    ),
    Substitution(
        "list_leaders",
        r"^([ \t]*+)([\*\-\+]|\d+\.)\s+",
        _list_leader_template,
        flags=_M,
        when=lambda o: o.strip_list_leaders,
    ),
    # GitHub-flavored extras
    Substitution("gfm_header_underlines", r"\n={2,}", "\n", when=_gfm),
    Substitution("gfm_tilde_fences", r"~{3}.*\n", when=_gfm),
    Substitution("gfm_strikethrough", r"~~", when=_gfm),
    FencedCodeExtractor(),
    Substitution(
        "abbreviations",
        r"\*\[.*\]:.*\n",
        when=lambda o: o.strip_abbreviations,
    ),
    HtmlTagStripper(),
    Substitution("setext_underlines", r"^[=\-]{2,}\s*$", flags=_M),
    Substitution("footnote_markers", r"\[\^.+?\](: .*?$)?", flags=_M),
    Substitution("footnote_definitions", r"\s{0,2}\[.*?\]: .*?$", flags=_M),
    Substitution(
        "images",
        r"!\[(.*?)\][\[(].*?[\])]",
        lambda o: r"\1" if o.use_image_alt_text else "",
    ),
    Substitution(
        "links",
        r"\[([\s\S]*?)\]\s*[(\[](.*?)[)\]]",
        lambda o: r"\2" if o.replace_links_with_url else r"\1",
        flags=re.DOTALL,
    ),
    Substitution("blockquotes", r"^(\n)?\s{0,3}>\s?", r"\1", flags=_M),
    Substitution("reference_links", r'^\s{1,2}\[(.*?)\]: (\S+)( ".*?")?\s*$', flags=_M),
    # Closed form (## Heading ##) first, then open form
    Substitution(
        "atx_headers",
        r"^(\n)?[ \t]*+#{1,6}+(?:[ \t]++(.*\S))?[ \t]++#++[ \t]*+$"
        r"|^(\n)?[ \t]*+#{1,6}+(?:[ \t]++(.*\S))?[ \t]*+$",
        r"\1\2\3\4",
        flags=_M,
    ),
    Substitution("asterisk_emphasis", r"(\*++)(\S)(.*?\S)??\1", r"\2\3"),
    Substitution("underscore_emphasis", r"(^|\W)(_++)(\S)(.*?\S)??\2($|\W)", r"\1\3\4\5", flags=_M),
    Substitution("single_line_fences", r"(`{3,})(.*?)\1", r"\2", flags=_M),
    Substitution("inline_code", r"`(.+?)`", r"\1"),
    Substitution("strikethrough", r"~(.*?)~", r"\1"),
)


def build_pipeline(stages: list[Stage] | tuple[Stage, ...] | None = None) -> RewritePipeline:
    return RewritePipeline(list(STAGES if stages is None else stages))
