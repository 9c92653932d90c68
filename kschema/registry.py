"""
Entity Registry — static schema catalog for remote API entity types.

Every entity type the remote API exposes is declared here as a literal
table of field rows. Query layers ask the registry which fields may be
used in filter and sort expressions before building a request.

EntityDef captures:
  A. Identity (name, category, description)
  B. Fields, in declaration order (FieldDef)
  C. Derived views (filterable, sortable, unflagged)

FieldDef captures:
  A. Core type (name, FieldType)
  B. Query eligibility (filterable, sortable), independent of each other
  C. Provenance (position, description, tags)
"""

import dataclasses
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional


logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when an entity definition or a field lookup fails."""


class ConfigurationError(RegistryError):
    """Raised when an entity type is not known to the registry."""


# ── Semantic kinds ────────────────────────────────────────────────

INTEGER = "integer"
NUMBER = "number"
TEXT = "text"
BOOLEAN = "boolean"
TIMESTAMP = "timestamp"
OPAQUE = "opaque"
ENTITY = "entity"
ARRAY = "array"

_SCALAR_KINDS = {
    bool: BOOLEAN,
    int: INTEGER,
    float: NUMBER,
    str: TEXT,
    datetime: TIMESTAMP,
    object: OPAQUE,
}


@dataclasses.dataclass(frozen=True)
class FieldType:
    """Semantic type of a field: a scalar kind, an entity, or an array."""

    kind: str
    ref: Optional[str] = None           # entity name when kind == ENTITY
    item: Optional["FieldType"] = None  # element type when kind == ARRAY

    @property
    def entity_ref(self) -> Optional[str]:
        """Name of the nested entity, looking through arrays."""
        if self.kind == ENTITY:
            return self.ref
        if self.kind == ARRAY:
            return self.item.entity_ref
        return None

    def __str__(self):
        if self.kind == ENTITY:
            return self.ref
        if self.kind == ARRAY:
            return f"{self.item}[]"
        return self.kind


def field_type(declared) -> FieldType:
    """Coerce a table cell into a FieldType.

    Accepts a FieldType, a Python scalar type (int, float, str, bool,
    datetime, object) or an entity name string.
    """
    if isinstance(declared, FieldType):
        _check_field_type(declared)
        return declared
    if isinstance(declared, str):
        if not declared:
            raise RegistryError("Entity reference must be a non-empty name")
        return FieldType(ENTITY, ref=declared)
    if isinstance(declared, type) and declared in _SCALAR_KINDS:
        return FieldType(_SCALAR_KINDS[declared])
    raise RegistryError(f"Unsupported field type: {declared!r}")


_KINDS = set(_SCALAR_KINDS.values()) | {ENTITY, ARRAY}


def _check_field_type(ftype: FieldType) -> None:
    """Reject a hand-built FieldType that the catalog cannot describe."""
    if ftype.kind not in _KINDS:
        raise RegistryError(f"Unsupported field kind: {ftype.kind!r}")
    if ftype.kind == ENTITY and (not isinstance(ftype.ref, str) or not ftype.ref):
        raise RegistryError("Entity reference must be a non-empty name")
    if ftype.kind == ARRAY:
        if not isinstance(ftype.item, FieldType):
            raise RegistryError("Array field type requires an element type")
        _check_field_type(ftype.item)


def array_of(declared) -> FieldType:
    """Array type whose elements are `declared`."""
    return FieldType(ARRAY, item=field_type(declared))


@dataclasses.dataclass(frozen=True)
class FieldDef:
    """Canonical definition of one field of an entity type."""

    entity: str
    name: str
    type: FieldType
    filterable: bool = False
    sortable: bool = False
    position: int = 0
    description: str = ""
    tags: tuple = ()


@dataclasses.dataclass(frozen=True)
class EntityDef:
    """A named entity type with its ordered fields."""

    name: str
    fields: tuple
    description: str = ""
    category: Optional[str] = None

    @property
    def filterable(self) -> tuple:
        return tuple(f for f in self.fields if f.filterable)

    @property
    def sortable(self) -> tuple:
        return tuple(f for f in self.fields if f.sortable)

    @property
    def unflagged(self) -> tuple:
        return tuple(
            f for f in self.fields if not (f.filterable or f.sortable)
        )

    def field_names(self) -> list:
        return [f.name for f in self.fields]


_ROW_EXTRAS = ("description", "tags")


class EntityRegistry:
    """
    Static catalog of entity types and their query-eligible fields.

    Entities are declared with define() from table literals, checked with
    validate() once every domain module has loaded, then frozen. A frozen
    registry is safe to read from any thread.
    """

    def __init__(self):
        self._entities: dict[str, EntityDef] = {}
        self._frozen = False

    # ── Define entities ───────────────────────────────────────────

    def define(self, name: str, fields: list, description: str = "",
               category: Optional[str] = None) -> EntityDef:
        """Register a new entity type in the catalog.

        Each row of `fields` is (name, type, filterable, sortable), with an
        optional fifth mapping holding "description" and/or "tags".

        Raises RegistryError if:
        - the registry is frozen
        - the entity or one of its field names is already defined
        - a row is malformed, a flag is not a bool, or a type is unsupported
        """
        if self._frozen:
            raise RegistryError(
                f"Entity '{name}': registry is frozen, no new definitions"
            )
        if not name:
            raise RegistryError("Entity name is required")
        if name in self._entities:
            raise RegistryError(f"Entity '{name}' is already defined")

        defs = []
        seen = set()
        for position, row in enumerate(fields):
            fdef = self._build_field(name, position, row)
            if fdef.name in seen:
                raise RegistryError(
                    f"Entity '{name}': field '{fdef.name}' is declared twice"
                )
            seen.add(fdef.name)
            defs.append(fdef)

        entity = EntityDef(
            name=name,
            fields=tuple(defs),
            description=description,
            category=category,
        )
        self._entities[name] = entity
        logger.debug("Defined entity %s with %d fields", name, len(defs))
        return entity

    @staticmethod
    def _build_field(entity: str, position: int, row) -> FieldDef:
        if not isinstance(row, tuple) or len(row) not in (4, 5):
            raise RegistryError(
                f"Entity '{entity}': field row {position} must be "
                f"(name, type, filterable, sortable[, extras]), got {row!r}"
            )
        fname, ftype, filterable, sortable = row[:4]
        extras: dict[str, Any] = row[4] if len(row) == 5 else {}

        if not isinstance(fname, str) or not fname:
            raise RegistryError(
                f"Entity '{entity}': field row {position} has no name"
            )
        if not isinstance(filterable, bool) or not isinstance(sortable, bool):
            raise RegistryError(
                f"{entity}.{fname}: filterable and sortable must be bools"
            )
        if not isinstance(extras, Mapping):
            raise RegistryError(
                f"{entity}.{fname}: field metadata must be a mapping"
            )
        unknown = set(extras) - set(_ROW_EXTRAS)
        if unknown:
            raise RegistryError(
                f"{entity}.{fname}: unknown field metadata {sorted(unknown)}"
            )
        tags = extras.get("tags", ())
        if (not isinstance(tags, (list, tuple))
                or not all(isinstance(t, str) for t in tags)):
            raise RegistryError(
                f"{entity}.{fname}: tags must be a list or tuple of strings"
            )
        try:
            resolved = field_type(ftype)
        except RegistryError as exc:
            raise RegistryError(f"{entity}.{fname}: {exc}") from exc

        return FieldDef(
            entity=entity,
            name=fname,
            type=resolved,
            filterable=filterable,
            sortable=sortable,
            position=position,
            description=extras.get("description", ""),
            tags=tuple(tags),
        )

    # ── Lookup ────────────────────────────────────────────────────

    def get(self, name: str) -> EntityDef:
        """Get an entity definition by exact name.

        Raises ConfigurationError if not found.
        """
        if name not in self._entities:
            raise ConfigurationError(
                f"Entity type '{name}' is not defined in registry"
            )
        return self._entities[name]

    def has(self, name: str) -> bool:
        return name in self._entities

    def entities(self) -> list:
        """Return all entity names in definition order."""
        return list(self._entities)

    def fields_for(self, name: str) -> tuple:
        return self.get(name).fields

    def field(self, name: str, field_name: str) -> FieldDef:
        """Get one field of an entity type.

        Raises ConfigurationError for an unknown entity type and
        RegistryError for an unknown field.
        """
        for f in self.get(name).fields:
            if f.name == field_name:
                return f
        raise RegistryError(
            f"{name}.{field_name}: field is not declared on entity '{name}'"
        )

    # ── Query eligibility ─────────────────────────────────────────

    def filterable_fields(self, name: str) -> tuple:
        """Fields of `name` usable in a filter expression, in order."""
        return self.get(name).filterable

    def sortable_fields(self, name: str) -> tuple:
        """Fields of `name` usable in a sort expression, in order."""
        return self.get(name).sortable

    def unflagged_fields(self, name: str) -> tuple:
        """Fields of `name` that are neither filterable nor sortable."""
        return self.get(name).unflagged

    def check_filter(self, name: str, field_name: str) -> FieldDef:
        """Return the field if it may appear in a filter, else raise."""
        f = self.field(name, field_name)
        if not f.filterable:
            raise RegistryError(f"{name}.{field_name}: field is not filterable")
        return f

    def check_sort(self, name: str, field_name: str) -> FieldDef:
        """Return the field if it may appear in a sort, else raise."""
        f = self.field(name, field_name)
        if not f.sortable:
            raise RegistryError(f"{name}.{field_name}: field is not sortable")
        return f

    # ── Composition ───────────────────────────────────────────────

    def references(self, name: str) -> list:
        """Entity types nested in `name`, directly or as array elements."""
        result = []
        for f in self.get(name).fields:
            ref = f.type.entity_ref
            if ref is not None and ref not in result:
                result.append(ref)
        return result

    def entities_with(self, field_name: str) -> list:
        """Return all entity names that declare a field called `field_name`."""
        return [
            name for name, entity in self._entities.items()
            if any(f.name == field_name for f in entity.fields)
        ]

    def validate(self) -> None:
        """Check that every entity reference resolves to a defined entity.

        Raises RegistryError listing every dangling reference.
        """
        dangling = []
        for entity in self._entities.values():
            for f in entity.fields:
                ref = f.type.entity_ref
                if ref is not None and ref not in self._entities:
                    dangling.append(f"{entity.name}.{f.name} -> {ref}")
        if dangling:
            raise RegistryError(
                "Unresolved entity references: " + ", ".join(dangling)
            )

    # ── Lifecycle ─────────────────────────────────────────────────

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        logger.info(
            "Entity registry frozen: %d entities, %d fields",
            len(self._entities),
            sum(len(e.fields) for e in self._entities.values()),
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Introspection ─────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Describe the whole catalog as plain data."""
        return {
            name: {
                "category": entity.category,
                "description": entity.description,
                "fields": [
                    {
                        "name": f.name,
                        "type": str(f.type),
                        "filterable": f.filterable,
                        "sortable": f.sortable,
                    }
                    for f in entity.fields
                ],
            }
            for name, entity in self._entities.items()
        }

    def __len__(self):
        return len(self._entities)

    def __contains__(self, name):
        return name in self._entities
