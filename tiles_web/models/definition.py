"""Pydantic models for Tiles definitions files."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class DefinitionConfig(BaseModel):
    """One definition entry as written in a definitions file."""

    name: str = Field(..., min_length=1, description="Unique definition name, e.g. 'site.index'")
    path: str | None = Field(default=None, description="Layout template rendered for this definition")
    extends: str | None = Field(default=None, description="Name of the parent definition")
    controller: str | None = Field(default=None, description="Controller class as 'package.module:ClassName'")
    attributes: dict[str, Any] = Field(default_factory=dict, description="Attributes put into the component context")

    @field_validator("name", mode="after")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name is not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("definition name must not be empty")
        return v

    @field_validator("extends", "path", "controller", mode="after")
    @classmethod
    def strip_blank(cls, v: str | None) -> str | None:
        """Treat whitespace-only strings as missing."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class DefinitionsFile(BaseModel):
    """Top-level structure of a JSON definitions file."""

    definitions: list[DefinitionConfig] = Field(default_factory=list)
