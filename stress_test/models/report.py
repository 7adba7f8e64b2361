"""Models for aggregated run results."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class RunReport:
    """Final outcome of a run.

    Only attempts that received a response and read its body are counted;
    attempts that failed at transport or body-read level are left out, so
    ``completed`` can be lower than the number of requests issued.
    """

    completed: int = 0
    succeeded: int = 0
    status_counts: Mapping[int, int] = field(default_factory=dict)
    elapsed: float = 0.0
