"""
Configuration data models for tally.

These models define the structure of .tally.json and
~/.config/tally/config.json files, with validation via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field


class CliConfig(BaseModel):
    """
    Defaults for the tally command.

    Command-line flags override these values.
    """

    steps: int = Field(
        default=1,
        ge=1,
        le=1000,
        description="Number of increments to apply after printing the start value",
    )
    strict: bool = Field(
        default=False,
        description="Reject malformed counter text instead of falling back to A1",
    )


class TallyConfig(BaseModel):
    """Top-level tally configuration."""

    debug: bool = Field(default=False, description="Enable debug logging")
    cli: CliConfig = Field(default_factory=CliConfig)

    model_config = ConfigDict(extra="ignore")
