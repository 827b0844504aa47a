from pydantic import BaseModel, ConfigDict, field_validator


class RemoveMarkdownOptions(BaseModel):
    """Read-only settings for a single markdown-stripping run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strip_list_leaders: bool = True
    list_unicode_char: str | None = None
    gfm_extensions: bool = True
    use_image_alt_text: bool = True
    strip_abbreviations: bool = False
    replace_links_with_url: bool = False
    html_tags_to_preserve: tuple[str, ...] = ()
    propagate_errors: bool = False

    @field_validator("list_unicode_char")
    @classmethod
    def blank_char_is_unset(cls, v: str | None) -> str | None:
        # An env-expanded "${BULLET}" with BULLET unset arrives as ""
        return v if v else None

    @field_validator("html_tags_to_preserve", mode="before")
    @classmethod
    def split_tag_string(cls, v: object) -> object:
        # "sub, sup" is accepted alongside a YAML list
        if isinstance(v, str):
            return [part.strip() for part in v.split(",")]
        return v

    @field_validator("html_tags_to_preserve")
    @classmethod
    def dedupe_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        # Ordered set: first occurrence wins, blank names are dropped
        return tuple(dict.fromkeys(tag.strip() for tag in v if tag.strip()))
