"""Shared type aliases for Skillpack."""

from .common import InstallScope, JsonObject, JsonScalar, JsonValue, OutcomeStatus, RunKind

__all__ = [
    "InstallScope",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutcomeStatus",
    "RunKind",
]
