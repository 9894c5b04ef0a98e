"""Request dependencies exposing state built once at application startup."""

from dataclasses import dataclass

from fastapi import Request

from seniwise.config import Settings
from seniwise.schema.labels import LabelResolver
from seniwise.schema.registry import FieldSchemaRegistry
from seniwise.services.records import ResidentRecordSource, StaffDirectory


@dataclass(frozen=True, slots=True)
class ResidentsContext:
    """Read-only collaborators shared by every resident request."""

    settings: Settings
    registry: FieldSchemaRegistry
    resolver: LabelResolver
    records: ResidentRecordSource
    staff: StaffDirectory


def get_residents_context(request: Request) -> ResidentsContext:
    """Return the startup-built context stored on application state."""

    return request.app.state.residents
