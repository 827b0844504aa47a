"""remove-markdown - strip markdown syntax down to readable plain text."""

from remove_markdown.config import RemoveMarkdownOptions, load_options
from remove_markdown.core import remove_markdown
from remove_markdown.transform import PatternError, RewritePipeline, build_pipeline

__version__ = "0.1.0"

__all__ = [
    "PatternError",
    "RemoveMarkdownOptions",
    "RewritePipeline",
    "build_pipeline",
    "load_options",
    "remove_markdown",
]
