"""WebSocket host that evaluates showdown rounds for remote clients."""

from .server import HostStats, ShowdownHost

__all__ = ["HostStats", "ShowdownHost"]
