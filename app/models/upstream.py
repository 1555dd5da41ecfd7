"""
Upstream call results
Outcomes of a single call to the data service
"""

from typing import Any, Optional, Union
from dataclasses import dataclass


@dataclass(frozen=True)
class UpstreamOk:
    """Upstream answered with a 2xx status"""
    status_code: int
    body: Optional[Any] = None

    @property
    def data(self) -> Any:
        """The `data` member of the upstream envelope, if any"""
        if isinstance(self.body, dict):
            return self.body.get("data")
        return None


@dataclass(frozen=True)
class UpstreamHTTPError:
    """Upstream answered with a non-2xx status"""
    status_code: int
    detail: str


@dataclass(frozen=True)
class UpstreamTransportError:
    """Upstream call did not produce a usable response"""
    detail: str
    status_code: int = 500


UpstreamResult = Union[UpstreamOk, UpstreamHTTPError, UpstreamTransportError]
