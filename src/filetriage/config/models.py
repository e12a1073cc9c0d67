"""Configuration models describing filetriage settings."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filetriage.discovery import DiscoveryOptions, FileCategory, SortKey

CategoryName = Literal["text", "image", "pdf", "binary"]
SortName = Literal["modified", "name", "size", "category"]
LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TriageBaseModel(BaseModel):
    """Shared configuration for filetriage Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class DiscoverySettings(TriageBaseModel):
    """Default discovery filters and ordering.

    Attributes:
        show_hidden: Whether dotfiles are included.
        categories: Categories to include; null includes every category.
        min_size: Inclusive minimum size in bytes.
        max_size: Inclusive maximum size in bytes.
        sort_by: Ordering applied to discovered files.
        reverse: Whether the ordering is reversed.
    """

    show_hidden: bool = False
    categories: Optional[List[CategoryName]] = None
    min_size: Optional[int] = Field(default=None, ge=0)
    max_size: Optional[int] = Field(default=None, ge=0)
    sort_by: SortName = "modified"
    reverse: bool = False

    def to_options(self) -> DiscoveryOptions:
        """Return the equivalent :class:`DiscoveryOptions`."""
        categories = None
        if self.categories is not None:
            categories = frozenset(FileCategory(name) for name in self.categories)
        return DiscoveryOptions(
            categories=categories,
            show_hidden=self.show_hidden,
            min_size=self.min_size,
            max_size=self.max_size,
            sort_by=SortKey(self.sort_by),
            reverse=self.reverse,
        )


class LoggingSettings(TriageBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level; names are case-insensitive.
    """

    level: LevelName = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class CLIOptions(TriageBaseModel):
    """CLI behavior defaults.

    Attributes:
        confirm_quit: Whether quitting with undecided files asks for confirmation.
        show_summary: Whether the triage command prints a summary on exit.
    """

    confirm_quit: bool = True
    show_summary: bool = True


class TriageConfig(TriageBaseModel):
    """Top-level configuration for filetriage.

    Attributes:
        discovery: Discovery defaults.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "TriageBaseModel",
    "DiscoverySettings",
    "LoggingSettings",
    "CLIOptions",
    "TriageConfig",
]
