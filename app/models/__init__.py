"""
Data models for the user gateway
"""

from .envelope import Envelope
from .upstream import UpstreamOk, UpstreamHTTPError, UpstreamTransportError, UpstreamResult

__all__ = [
    "Envelope",
    "UpstreamOk",
    "UpstreamHTTPError",
    "UpstreamTransportError",
    "UpstreamResult",
]
