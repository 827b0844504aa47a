"""Options loading from YAML files.

A file may hold the options at the top level or under a ``remove_markdown:``
section, so the same block can sit inside a larger application config.
"""

import os
import re
from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import RemoveMarkdownOptions

SECTION = "remove_markdown"

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def load_options(path: str | None = None) -> RemoveMarkdownOptions:
    """Load options from the first non-empty file: explicit > project-local > user-global.

    Falls back to defaults when no file has content. Unknown keys are an
    error so a misspelt option is never silently ignored.
    """
    for candidate in _candidate_paths(path):
        section = _read_section(candidate)
        if section is None:
            continue
        try:
            return RemoveMarkdownOptions.model_validate(section)
        except ValidationError as e:
            unknown = [
                ".".join(map(str, err["loc"]))
                for err in e.errors()
                if err["type"] == "extra_forbidden"
            ]
            if unknown:
                raise ValueError(f"Unknown option(s) in {candidate}: {', '.join(unknown)}") from e
            raise ValueError(f"Invalid config in {candidate}: {e}") from e

    return RemoveMarkdownOptions()


def _candidate_paths(path: str | None) -> Iterator[Path]:
    if path:
        yield Path(path)
    yield Path("./remove_markdown.yaml")
    yield Path.home() / ".config" / "remove_markdown" / "config.yaml"


def _read_section(path: Path) -> dict | None:
    """Return the expanded options mapping from ``path``, or None if absent or empty."""
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    if SECTION in raw:
        raw = raw[SECTION]
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: '{SECTION}' must be a mapping")

    return {key: _expand_env_vars(value) for key, value in raw.items()}


def _expand_env_vars(value: object) -> object:
    """Expand ${VAR} in a string option or in each item of a list option."""
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if isinstance(value, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    return value


# Commented template for a project-local remove_markdown.yaml
DEFAULT_OPTIONS_TEMPLATE = """\
# remove_markdown.yaml

# Lists
strip_list_leaders: true
# list_unicode_char: "•"       # replaces stripped leaders when set

# GitHub-Flavored Markdown (tilde fences, ~~strikethrough~~, ``` blocks)
gfm_extensions: true

# Images and links
use_image_alt_text: true
replace_links_with_url: false

# Abbreviation definitions (*[HTML]: Hyper Text Markup Language)
strip_abbreviations: false

# HTML tags kept verbatim, case-sensitive; a list or "sub, sup"
html_tags_to_preserve: []

# Report pattern failures to the caller's error hook as well as the log
propagate_errors: false
"""
