"""Static resident field schema and label tables."""

from seniwise.schema.labels import LabelCatalog, LabelResolver, default_label_catalog, interpolate
from seniwise.schema.registry import (
    FieldSchemaRegistry,
    SchemaRegistryError,
    build_field_schema_registry,
    flatten_visit_actions,
)

__all__ = [
    "FieldSchemaRegistry",
    "LabelCatalog",
    "LabelResolver",
    "SchemaRegistryError",
    "build_field_schema_registry",
    "default_label_catalog",
    "flatten_visit_actions",
    "interpolate",
]
