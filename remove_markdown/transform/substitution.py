"""Global regex substitution, the building block for most stages."""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import cached_property

from remove_markdown.config.models import RemoveMarkdownOptions

from .pipeline import Stage


def substitute(text: str, pattern: str | re.Pattern[str], template: str, flags: int = 0) -> str:
    """Replace every non-overlapping match of ``pattern`` with ``template``.

    ``template`` uses ``re`` group syntax (``\\1``, ``\\g<name>``). Groups that
    did not participate in the match expand to the empty string.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, flags)
    return pattern.sub(template, text)


def escape_template(literal: str) -> str:
    """Make ``literal`` safe to embed in a substitution template."""
    return literal.replace("\\", r"\\")


class Substitution(Stage):
    """A stage that is a single global substitution.

    ``template`` may be a callable taking the options, for stages whose
    replacement depends on configuration (image alt text, link targets).
    ``when`` gates the stage on the options.
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        template: str | Callable[[RemoveMarkdownOptions], str] = "",
        flags: int = 0,
        when: Callable[[RemoveMarkdownOptions], bool] | None = None,
    ) -> None:
        self.name = name
        self.pattern = pattern
        self.template = template
        self.flags = flags
        self._when = when

    @cached_property
    def regex(self) -> re.Pattern[str]:
        return re.compile(self.pattern, self.flags)

    def enabled(self, options: RemoveMarkdownOptions) -> bool:
        return self._when is None or self._when(options)

    def apply(self, text: str, options: RemoveMarkdownOptions) -> str:
        template = self.template(options) if callable(self.template) else self.template
        return substitute(text, self.regex, template)

    def __repr__(self) -> str:
        return f"Substitution({self.name!r}, {self.pattern!r})"
