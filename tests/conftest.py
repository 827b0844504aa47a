"""Shared test fixtures for remove-markdown."""

import pytest

from remove_markdown.config.models import RemoveMarkdownOptions
from remove_markdown.transform.stages import build_pipeline


@pytest.fixture
def default_options():
    return RemoveMarkdownOptions()


@pytest.fixture
def pipeline():
    return build_pipeline()


@pytest.fixture
def sample_document():
    """A short doc touching most syntax the pipeline strips."""
    return (
        "# Release notes\n"
        "\n"
        "Version **2.1** ships a _faster_ parser. See [the docs](https://example.com/docs).\n"
        "\n"
        "* * *\n"
        "\n"
        "- Fixed `parse()` on empty input\n"
        "- Dropped ~~legacy~~ mode\n"
        "\n"
        "> Upgrade before May.\n"
        "\n"
        "```python\n"
        "import parser\n"
        "```\n"
    )
