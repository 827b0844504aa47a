"""RewritePipeline: runs ordered stages over a text buffer."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from remove_markdown.config.models import RemoveMarkdownOptions
from remove_markdown.transform.models import PatternError

logger = logging.getLogger(__name__)


class Stage(ABC):
    name: str = ""

    def enabled(self, options: RemoveMarkdownOptions) -> bool:
        return True

    @abstractmethod
    def apply(self, text: str, options: RemoveMarkdownOptions) -> str:
        """Rewrite the whole buffer. May raise re.error."""
        ...


class RewritePipeline:
    def __init__(self, stages: list[Stage]):
        self.stages = stages

    def stage_names(self, options: RemoveMarkdownOptions) -> list[str]:
        """Names of the stages that run under ``options``, in order."""
        return [s.name for s in self.stages if s.enabled(options)]

    def run(self, text: str, options: RemoveMarkdownOptions) -> str:
        for index, stage in enumerate(self.stages, start=1):
            if not stage.enabled(options):
                continue
            try:
                text = stage.apply(text, options)
            except re.error as e:
                raise PatternError(index, stage.name, e) from e
            logger.debug("stage %d (%s) done, %d chars", index, stage.name, len(text))
        return text
