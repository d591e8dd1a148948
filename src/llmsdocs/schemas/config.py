"""Server configuration models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _ConfigSection(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ServerInfo(_ConfigSection):
    """Name and version advertised to MCP clients."""

    name: str = "llmsdocs"
    version: str = "0.1.0"


class DocumentationSettings(_ConfigSection):
    """Where to find the corpus and how much of it to preview.

    Attributes:
        fallback_paths: Paths tried in order when no explicit path is set.
            Relative paths are resolved against the working directory.
        preview_length: Number of content characters shown per search hit.
    """

    fallback_paths: list[str] = Field(
        default_factory=lambda: ["llms-full.txt", "docs/llms-full.txt"],
        validation_alias=AliasChoices("fallback_paths", "fallbackPaths"),
    )
    preview_length: int = Field(
        500, ge=1, validation_alias=AliasChoices("preview_length", "previewLength")
    )


class SearchSettings(_ConfigSection):
    """Fuzzy search parameters consumed when the index is built.

    Attributes:
        threshold: Highest accepted match score, 0.0 (exact only) to 1.0
            (anything matches). Lower is stricter.
        min_match_char_length: Shortest run of pattern characters a match
            window must contain to count.
        max_results: Number of hits returned when the caller gives no limit.
        max_results_cap: Upper bound applied to caller supplied limits.
    """

    threshold: float = Field(0.3, ge=0.0, le=1.0)
    min_match_char_length: int = Field(
        2,
        ge=1,
        validation_alias=AliasChoices("min_match_char_length", "minMatchCharLength"),
    )
    max_results: int = Field(
        5, ge=1, validation_alias=AliasChoices("max_results", "maxResults")
    )
    max_results_cap: int = Field(
        20, ge=1, validation_alias=AliasChoices("max_results_cap", "maxResultsCap")
    )


class ListSettings(_ConfigSection):
    """Section listing parameters."""

    max_sections: int = Field(
        50, ge=1, validation_alias=AliasChoices("max_sections", "maxSections")
    )


class ServerConfig(_ConfigSection):
    """Complete configuration for the documentation server."""

    server: ServerInfo = Field(default_factory=ServerInfo)
    documentation: DocumentationSettings = Field(default_factory=DocumentationSettings)
    search_defaults: SearchSettings = Field(
        default_factory=SearchSettings,
        validation_alias=AliasChoices("search_defaults", "searchDefaults"),
    )
    list_defaults: ListSettings = Field(
        default_factory=ListSettings,
        validation_alias=AliasChoices("list_defaults", "listDefaults"),
    )
