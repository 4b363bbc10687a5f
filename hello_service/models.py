"""
Request model for EC2 Hello Service
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def iso_timestamp(moment: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with milliseconds and a Z suffix"""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True)
class IncomingRequest:
    """A request as seen by the logging step, discarded once answered"""
    method: str
    path: str
    arrived_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def log_line(self) -> str:
        return f"{iso_timestamp(self.arrived_at)} - {self.method} {self.path}"
