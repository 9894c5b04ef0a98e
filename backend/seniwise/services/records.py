"""In-memory resident records and staff roster loaded from JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Any

logger = logging.getLogger(__name__)

RawResident = Mapping[str, Any]


class RecordSourceError(RuntimeError):
    """Raised when a record file cannot be read or has an unexpected shape."""


def _read_json_list(path: Path, *, what: str) -> list[Any]:
    started = perf_counter()
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.exception("residents.record_load_failed kind=%s path=%s", what, path)
        raise RecordSourceError(f"Unable to load {what} from {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise RecordSourceError(f"Expected a JSON list of {what} in {path}")
    logger.info(
        "residents.record_load_timing kind=%s path=%s rows=%d total_ms=%.2f",
        what,
        path,
        len(payload),
        (perf_counter() - started) * 1000.0,
    )
    return payload


@dataclass(frozen=True, slots=True)
class StaffMember:
    username: str
    name: str
    email: str = ""


class StaffDirectory:
    """Staff roster used for display names and the responsible-staff options."""

    def __init__(self, members: Iterable[StaffMember]) -> None:
        self._members = tuple(members)
        self._by_username = {member.username: member for member in self._members}

    @classmethod
    def from_json_file(cls, path: Path) -> StaffDirectory:
        rows = _read_json_list(path, what="staff")
        return cls(
            StaffMember(
                username=str(row.get("username", "")),
                name=str(row.get("name", "")),
                email=str(row.get("email", "")),
            )
            for row in rows
            if isinstance(row, dict) and row.get("username")
        )

    @property
    def members(self) -> tuple[StaffMember, ...]:
        return self._members

    def get(self, username: str) -> StaffMember | None:
        return self._by_username.get(username)

    def display_name(self, username: str) -> str:
        """Return the staff member's name, or the username itself when unknown."""

        member = self.get(username)
        return member.name if member is not None else username


class ResidentRecordSource:
    """Read-only collection of raw resident records keyed by profile uuid."""

    def __init__(self, records: Iterable[RawResident]) -> None:
        self._records = tuple(record for record in records if isinstance(record, Mapping))
        self._by_uuid: dict[str, RawResident] = {}
        for record in self._records:
            profile = record.get("profile")
            uuid = profile.get("uuid") if isinstance(profile, Mapping) else None
            if isinstance(uuid, str) and uuid and uuid not in self._by_uuid:
                self._by_uuid[uuid] = record

    @classmethod
    def from_json_file(cls, path: Path) -> ResidentRecordSource:
        return cls(_read_json_list(path, what="residents"))

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> tuple[RawResident, ...]:
        return self._records

    def get(self, uuid: str) -> RawResident | None:
        return self._by_uuid.get(uuid)
