"""Probe variants: one frozen model per resource kind."""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Returns google.auth credentials; only called when a probe has no JSON credentials
CredentialsSource = Callable[[], Any]


class _ProbeBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class HTTPProbe(_ProbeBase):
    """GET ``url`` and expect a status below 400."""

    kind: Literal["http"] = "http"
    url: str
    method: str = ""
    timeout: float | None = Field(default=None, description="Seconds; None disables the timeout")


class MySQLProbe(_ProbeBase):
    """Open a MySQL connection and ping it."""

    kind: Literal["mysql"] = "mysql"
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = Field(default="", repr=False)
    database: str = ""


class RedisProbe(_ProbeBase):
    """Open a Redis client and ``PING`` it."""

    kind: Literal["redis"] = "redis"
    host: str = ""
    port: int = 0
    password: str = Field(default="", repr=False)
    db: int = 0


class PubSubProbe(_ProbeBase):
    """Check that a Pub/Sub topic exists."""

    kind: Literal["pubsub"] = "pubsub"
    project_id: str = ""
    topic_id: str = ""
    credentials_json: str = Field(default="", repr=False)
    ambient_credentials: CredentialsSource | None = Field(
        default=None, repr=False, exclude=True,
    )

    @property
    def uses_ambient_credentials(self) -> bool:
        return not self.credentials_json


Probe = Annotated[
    Union[HTTPProbe, MySQLProbe, RedisProbe, PubSubProbe],
    Field(discriminator="kind"),
]
