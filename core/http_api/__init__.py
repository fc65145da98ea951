"""
FOS HTTP API - Public API
=========================
"""

from core.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from core.http_api.errors import (
    HTTP_STATUS_BY_KIND,
    error_response,
    map_rejection_reason,
    rejection_response,
    status_for_kind,
    success_response,
)

__all__ = [
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HTTP_STATUS_BY_KIND",
    "error_response",
    "map_rejection_reason",
    "rejection_response",
    "status_for_kind",
    "success_response",
]
