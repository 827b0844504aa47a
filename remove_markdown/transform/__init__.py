"""Ordered rewrite stages that turn markdown into plain text."""

from .fenced import FencedCodeExtractor, extract_fenced_blocks
from .html import HtmlTagStripper, build_html_pattern
from .models import PatternError
from .pipeline import RewritePipeline, Stage
from .stages import STAGES, build_pipeline
from .substitution import Substitution, substitute

__all__ = [
    "FencedCodeExtractor",
    "HtmlTagStripper",
    "PatternError",
    "RewritePipeline",
    "STAGES",
    "Stage",
    "Substitution",
    "build_html_pattern",
    "build_pipeline",
    "extract_fenced_blocks",
    "substitute",
]
