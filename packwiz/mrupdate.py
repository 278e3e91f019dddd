"""Modrinth update metadata and update checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from packwiz.modrinth import ModrinthError, Version, VersionFile


def _field(data: Mapping[str, Any], key: str) -> Any:
    folded = key.casefold()
    found: Any = None
    for k, v in data.items():
        if k == key:
            return v
        if isinstance(k, str) and k.casefold() == folded:
            found = v
    return found


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' expected type 'string', got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class MrUpdateData:
    """The modrinth section of a mod's update metadata."""

    project_id: str = ""
    installed_version: str = ""

    def to_map(self) -> dict[str, str]:
        return {"mod-id": self.project_id, "version": self.installed_version}


def parse_update_data(data: Mapping[str, Any]) -> MrUpdateData:
    """Read update metadata from its table form."""
    return MrUpdateData(project_id=_string(data, "mod-id"), installed_version=_string(data, "version"))


@dataclass
class UpdateCheck:
    """The result of checking one mod for an update."""

    update_available: bool = False
    update_string: str = ""
    cached_state: Version | None = None
    error: Exception | None = None


def primary_file(files: Sequence[VersionFile]) -> VersionFile:
    """The file to install from a version: the last primary file, else the first file."""
    if not files:
        raise ModrinthError("version doesn't have any files attached")
    chosen = files[0]
    for file in files:
        if file.primary:
            chosen = file
    return chosen


def check_update(data: MrUpdateData, file_name: str, latest: Version) -> UpdateCheck:
    """Compare the installed version with the latest one."""
    if latest.id == data.installed_version:
        return UpdateCheck(update_available=False)
    if not latest.files:
        return UpdateCheck(error=ModrinthError("new version doesn't have any files"))
    new_file = primary_file(latest.files)
    return UpdateCheck(
        update_available=True,
        update_string=f"{file_name} -> {new_file.filename}",
        cached_state=latest,
    )