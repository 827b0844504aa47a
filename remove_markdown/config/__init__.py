from .loader import load_options
from .models import RemoveMarkdownOptions

__all__ = [
    "RemoveMarkdownOptions",
    "load_options",
]
