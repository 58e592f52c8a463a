"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

InstallScope: TypeAlias = Literal["project", "global"]
OutcomeStatus: TypeAlias = Literal["installed", "replaced", "unchanged", "valid", "invalid", "conflict", "io_error"]
RunKind: TypeAlias = Literal["install", "validate"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
