"""Client and cluster-management helpers for OpenSearch."""

__version__ = "0.1.0"
__all__ = [
    "client",
    "data_service",
    "errors",
    "helpers",
    "requests",
    "responses",
    "security_service",
]