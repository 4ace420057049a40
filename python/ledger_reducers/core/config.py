"""Configuration management for ledger reducers."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings

from ledger_reducers.core.types import AddressMode

TABLE_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$"


class ReducerConfig(BaseModel):
    """Settings for one balance reducer instance.

    Accepts the camelCase names used by pipeline config files
    (``addressType``, ``onDecodeError``) as well as the attribute names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    address_type: AddressMode = Field(alias="addressType")
    prefix: str | None = Field(default=None, min_length=1, description="CRDT key namespace")
    table: str | None = Field(default=None, pattern=TABLE_PATTERN, description="Relational target table")
    backend: Literal["crdt", "relational"] | None = Field(default=None)
    on_decode_error: Literal["strict", "lenient"] = Field(default="strict", alias="onDecodeError")

    @model_validator(mode="after")
    def _check_backend(self) -> ReducerConfig:
        if self.resolved_backend == "relational" and not self.table:
            raise ValueError("relational backend requires a table")
        return self

    @property
    def resolved_backend(self) -> Literal["crdt", "relational"]:
        if self.backend is not None:
            return self.backend
        return "relational" if self.table else "crdt"

    @property
    def strict(self) -> bool:
        return self.on_decode_error == "strict"


class ReducerEntry(BaseModel):
    """One ``{name, config}`` item of the composed reducer list."""

    name: str = Field(default="BalanceByAddress")
    config: ReducerConfig


class PipelineConfig(BaseSettings):
    """Root configuration for a composed reduction."""

    reducers: list[ReducerEntry] = Field(default_factory=list)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")

    model_config = {"env_prefix": "LEDGER_REDUCERS_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> PipelineConfig:
        import yaml
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
