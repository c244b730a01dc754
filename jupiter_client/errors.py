"""
Client errors - one type per stage of a Jupiter API call.
"""
from __future__ import annotations

from typing import Any, Optional


class JupiterClientError(Exception):
    """Base error for Jupiter API calls. `stage` names the step that failed."""

    stage = "calling Jupiter API"

    def __init__(self, detail: str, stage: Optional[str] = None):
        if stage is not None:
            self.stage = stage
        self.detail = detail
        super().__init__(f"{self.stage}: {detail}")


class RequestBuildError(JupiterClientError):
    """The outbound request could not be constructed."""
    stage = "creating request"


class TransportError(JupiterClientError):
    """The request failed on the network (connect, timeout, protocol)."""
    stage = "making request"


class ResponseReadError(JupiterClientError):
    """The response body could not be read."""
    stage = "reading response"


class ResponseDecodeError(JupiterClientError):
    """
    The normalized body could not be decoded into the expected message.

    `raw` holds the body as parsed by a permissive JSON decoder, for
    diagnostics only. It is None when the body is not JSON at all.
    """
    stage = "unmarshaling response"

    def __init__(self, detail: str, stage: Optional[str] = None, raw: Any = None):
        super().__init__(detail, stage)
        self.raw = raw
