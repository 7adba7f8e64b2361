"""Run configuration built from command line flags."""

from typing import Self

from pydantic import Field, field_validator, model_validator

from stress_test.models.base import Model


class RunConfig(Model):
    """Settings for a single stress test run."""

    url: str = Field(..., description="Target URL hit by every attempt")
    requests: int = Field(default=10, gt=0, description="Total number of attempts")
    concurrency: int = Field(
        default=1, gt=0, description="Attempts allowed in flight at the same time"
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-attempt timeout in seconds (None waits forever)",
    )
    verify_ssl: bool = Field(
        default=False, description="Validate the server TLS certificate"
    )

    @field_validator("url")
    @classmethod
    def _require_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("URL is required")
        return value

    @model_validator(mode="after")
    def _check_requests_cover_concurrency(self) -> Self:
        if self.requests < self.concurrency:
            raise ValueError("Number of requests should be greater than concurrency")
        return self
