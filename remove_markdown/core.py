"""Public entry point: strip markdown syntax, falling back to the input on failure."""

from __future__ import annotations

import logging
from collections.abc import Callable

from remove_markdown.config.models import RemoveMarkdownOptions
from remove_markdown.transform.models import PatternError
from remove_markdown.transform.stages import build_pipeline

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = RemoveMarkdownOptions()
_PIPELINE = build_pipeline()


def remove_markdown(
    markdown: str,
    options: RemoveMarkdownOptions | None = None,
    on_error: Callable[[PatternError], None] | None = None,
) -> str:
    """Convert markdown to readable plain text.

    Never raises for pattern failures: if any stage fails the original
    ``markdown`` is returned untouched and a warning is logged. With
    ``options.propagate_errors`` the error is also handed to ``on_error``,
    or logged with its traceback when no hook is given.
    """
    opts = options if options is not None else _DEFAULT_OPTIONS
    try:
        return _PIPELINE.run(markdown, opts)
    except PatternError as e:
        logger.warning("remove-markdown encountered error: %s", e)
        if opts.propagate_errors:
            if on_error is not None:
                on_error(e)
            else:
                logger.error("remove-markdown stage %s failed", e.stage_name, exc_info=e)
        return markdown
