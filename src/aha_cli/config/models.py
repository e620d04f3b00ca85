"""Pydantic models for the check configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ResourceDescriptor(BaseModel):
    """One named entry under ``check.connections``.

    Holds the union of every kind's fields. Fields that do not apply to
    ``kind`` are carried but never looked at.
    """

    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    name: str
    kind: str = Field(default="", alias="type", description="mysql, http, redis or pubsub")
    checked: bool = Field(default=False, alias="is_checked")

    # mysql / redis
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = Field(default="", repr=False)
    database: str = ""
    db: int = Field(default=0, description="Redis DB index")

    # http
    url: str = ""
    method: str = ""
    timeout: str = Field(default="", description="Duration string, e.g. 5s or 1m30s")

    # pubsub
    project_id: str = ""
    credentials_json: str = Field(default="", repr=False)
    topic_id: str = ""


class CheckConfig(BaseModel):
    """Root configuration value passed to the factory and runner."""

    path: Path | None = None
    connections: dict[str, ResourceDescriptor] = Field(default_factory=dict)
