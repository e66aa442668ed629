from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Site configuration used to wire the local file adapters."""

    site_url: str = Field(default="http://localhost", validation_alias="KELP_SITE_URL")
    public_files_url: str | None = Field(
        default=None, validation_alias="KELP_PUBLIC_FILES_URL"
    )
    public_files_path: Path = Field(
        default=Path("sites/default/files"), validation_alias="KELP_PUBLIC_FILES_PATH"
    )
    private_files_path: Path | None = Field(
        default=None, validation_alias="KELP_PRIVATE_FILES_PATH"
    )
    link_title: str = Field(default="Learn More", validation_alias="KELP_LINK_TITLE")
    machine_name_separator: str = Field(
        default="_", validation_alias="KELP_MACHINE_NAME_SEPARATOR"
    )

    @field_validator("site_url", "public_files_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("URL settings must not be empty")
        return stripped

    @field_validator("machine_name_separator")
    @classmethod
    def _require_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("KELP_MACHINE_NAME_SEPARATOR must not be empty")
        return value

    @model_validator(mode="after")
    def _default_public_files_url(self) -> "Settings":
        if self.public_files_url is None:
            self.public_files_url = f"{self.site_url}/sites/default/files"
        return self

    model_config = SettingsConfigDict(case_sensitive=False)
