"""Exceptions raised when talking to an OpenSearch cluster."""

from __future__ import annotations


class GatewayError(Exception):
    """Base class of all errors raised by this package."""


class ApiError(GatewayError):
    """The cluster answered a request with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClusterHealthError(ApiError):
    """Fetching cluster health (or related state) failed."""

    def __init__(self, response: str, status_code: int | None = None) -> None:
        super().__init__(f"get error cluster health failed: {response}", status_code)
        self.response = response


class ClusterSettingsError(ApiError):
    """Fetching cluster settings failed."""

    def __init__(self, response: str, status_code: int | None = None) -> None:
        super().__init__(f"get error cluster settings failed: {response}", status_code)
        self.response = response


class CatIndicesError(ApiError):
    """The ``_cat/indices`` request failed."""

    def __init__(self, response: str, status_code: int | None = None) -> None:
        super().__init__(f"cat indices failed: {response}", status_code)
        self.response = response