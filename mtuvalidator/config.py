"""Environment-driven defaults for the CLI."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mtuvalidator.models import IPV4_MINIMUM_MTU, JUMBO_FRAME_MTU, Protocol
from mtuvalidator.platform._util import DEFAULT_TIMEOUT

ENV_PREFIX = "MTUVALIDATOR_"

OutputFormat = Literal["human", "json", "csv"]


class Settings(BaseSettings):
    """Defaults for ``mtuvalidator validate``; flags still override them.

    Each field is read from ``MTUVALIDATOR_<FIELD>``; blank variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, case_sensitive=False, extra="ignore", env_ignore_empty=True, frozen=True
    )

    min_mtu: int = Field(default=IPV4_MINIMUM_MTU, gt=0)
    max_mtu: int = Field(default=JUMBO_FRAME_MTU, gt=0)
    protocol: Protocol = Protocol.ETHERNET
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    output: OutputFormat = "human"

    @field_validator("protocol", mode="before")
    @classmethod
    def _protocol_by_name(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        try:
            return Protocol[v.strip().upper()]
        except KeyError:
            choices = ", ".join(p.name for p in Protocol)
            raise ValueError(f"unknown protocol '{v}' (choices: {choices})") from None

    @field_validator("output", mode="before")
    @classmethod
    def _output_lower(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _check_range(self) -> Settings:
        if self.min_mtu > self.max_mtu:
            raise ValueError(f"min_mtu ({self.min_mtu}) exceeds max_mtu ({self.max_mtu})")
        return self

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``MTUVALIDATOR_*`` variables.

        Raises:
            ValueError: A variable holds an invalid value; the message names it.
        """
        try:
            return cls()
        except ValidationError as e:
            names = ", ".join(f"{ENV_PREFIX}{str(err['loc'][0]).upper()}" for err in e.errors() if err["loc"]) or (
                f"{ENV_PREFIX}MIN_MTU/{ENV_PREFIX}MAX_MTU"
            )
            raise ValueError(f"Invalid environment configuration ({names}): {e}") from e
