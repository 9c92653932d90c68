"""
Tests for the Entity Registry — static schema catalog.

Covers:
- Entity definition and definition-time rules
- Field types (scalars, entity references, arrays)
- Lookup and unknown entity types
- Filterable / sortable views (order, independence, empty results)
- Filter and sort eligibility checks
- Composition (references, validate)
- Freezing
- Introspection (entities_with, to_dict)
"""

import logging
import pytest
from datetime import datetime

from kschema.registry import (
    ARRAY,
    BOOLEAN,
    ENTITY,
    INTEGER,
    NUMBER,
    OPAQUE,
    TEXT,
    TIMESTAMP,
    ConfigurationError,
    EntityDef,
    EntityRegistry,
    FieldDef,
    FieldType,
    RegistryError,
    array_of,
    field_type,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reg():
    """Fresh registry for each test."""
    return EntityRegistry()


@pytest.fixture
def desk_reg():
    """Registry pre-loaded with a small service desk domain."""
    r = EntityRegistry()
    r.define("Ticket", category="service_desk",
        description="Service desk ticket",
        fields=[
            ("TicketId", float, True, True),
            ("Summary", str, True, False),
            ("Created", datetime, True, True),
            ("Phone", str, False, False),
            ("LastModified", str, False, True),
            ("Owner", "Person", False, False),
            ("Watchers", array_of("Person"), False, False),
        ],
    )
    r.define("Person", fields=[
        ("Name", str, True, True),
        ("Attributes", object, False, False),
    ])
    r.define("Envelope", fields=[
        ("Status", str, False, False),
    ])
    return r


# ===========================================================================
# A. Entity Definition
# ===========================================================================

class TestDefine:

    def test_define_basic(self, reg):
        entity = reg.define("Agent", fields=[("AgentId", float, True, False)])
        assert entity.name == "Agent"
        assert entity.field_names() == ["AgentId"]

    def test_define_returns_entitydef(self, reg):
        entity = reg.define("Agent", fields=[])
        assert isinstance(entity, EntityDef)
        assert entity.fields == ()

    def test_define_metadata(self, reg):
        entity = reg.define("Agent", fields=[],
            description="Managed machine", category="agents")
        assert entity.description == "Managed machine"
        assert entity.category == "agents"

    def test_define_duplicate_entity_raises(self, reg):
        reg.define("Agent", fields=[])
        with pytest.raises(RegistryError, match="already defined"):
            reg.define("Agent", fields=[])

    def test_define_requires_name(self, reg):
        with pytest.raises(RegistryError, match="name is required"):
            reg.define("", fields=[])

    def test_duplicate_field_raises(self, reg):
        with pytest.raises(RegistryError, match="'Name' is declared twice"):
            reg.define("Agent", fields=[
                ("Name", str, True, True),
                ("Name", str, False, False),
            ])

    def test_malformed_row_raises(self, reg):
        with pytest.raises(RegistryError, match="field row 0 must be"):
            reg.define("Agent", fields=[("Name", str, True)])

    def test_list_row_rejected(self, reg):
        with pytest.raises(RegistryError, match="field row 0 must be"):
            reg.define("Agent", fields=[["Name", str, True, True]])

    def test_unnamed_field_raises(self, reg):
        with pytest.raises(RegistryError, match="has no name"):
            reg.define("Agent", fields=[("", str, True, True)])

    def test_non_bool_flag_raises(self, reg):
        with pytest.raises(RegistryError, match="must be bools"):
            reg.define("Agent", fields=[("Name", str, 1, 0)])

    def test_unsupported_type_raises(self, reg):
        with pytest.raises(RegistryError, match="Agent.Blob: Unsupported"):
            reg.define("Agent", fields=[("Blob", bytes, False, False)])

    def test_unknown_extra_raises(self, reg):
        with pytest.raises(RegistryError, match="unknown field metadata"):
            reg.define("Agent", fields=[
                ("Name", str, True, True, {"unit": "chars"}),
            ])

    def test_non_mapping_extra_raises(self, reg):
        with pytest.raises(RegistryError, match="Agent.Name: field metadata must be a mapping"):
            reg.define("Agent", fields=[
                ("Name", str, True, True, ["description"]),
            ])

    def test_string_tags_rejected(self, reg):
        with pytest.raises(RegistryError, match="tags must be a list or tuple"):
            reg.define("Doc", fields=[
                ("Size", int, True, True, {"tags": "retyped"}),
            ])

    def test_non_string_tag_rejected(self, reg):
        with pytest.raises(RegistryError, match="tags must be a list or tuple"):
            reg.define("Doc", fields=[
                ("Size", int, True, True, {"tags": ["retyped", 1]}),
            ])

    def test_row_extras(self, reg):
        entity = reg.define("Doc", fields=[
            ("Size", int, True, True, {
                "description": "Declared upstream as a record",
                "tags": ["retyped"],
            }),
        ])
        f = entity.fields[0]
        assert f.description == "Declared upstream as a record"
        assert f.tags == ("retyped",)

    def test_failed_define_leaves_no_entity(self, reg):
        with pytest.raises(RegistryError):
            reg.define("Agent", fields=[
                ("Name", str, True, True),
                ("Name", str, True, True),
            ])
        assert not reg.has("Agent")

    def test_define_logs_at_debug(self, reg, caplog):
        with caplog.at_level(logging.DEBUG, logger="kschema.registry"):
            reg.define("Agent", fields=[("Name", str, True, True)])
        assert "Defined entity Agent with 1 fields" in caplog.text


# ===========================================================================
# B. Field Types
# ===========================================================================

class TestFieldTypes:

    @pytest.mark.parametrize("declared, kind", [
        (int, INTEGER),
        (float, NUMBER),
        (str, TEXT),
        (bool, BOOLEAN),
        (datetime, TIMESTAMP),
        (object, OPAQUE),
    ])
    def test_scalar_kinds(self, declared, kind):
        assert field_type(declared).kind == kind

    def test_entity_reference(self):
        t = field_type("Probe")
        assert t.kind == ENTITY
        assert t.ref == "Probe"
        assert t.entity_ref == "Probe"
        assert str(t) == "Probe"

    def test_empty_reference_rejected(self):
        with pytest.raises(RegistryError, match="non-empty"):
            field_type("")

    def test_array_of_entity(self):
        t = array_of("DeviceDrive")
        assert t.kind == ARRAY
        assert t.item == FieldType(ENTITY, ref="DeviceDrive")
        assert t.entity_ref == "DeviceDrive"
        assert str(t) == "DeviceDrive[]"

    def test_array_of_scalar(self):
        t = array_of(float)
        assert t.entity_ref is None
        assert str(t) == "number[]"

    def test_fieldtype_passthrough(self):
        t = FieldType(TEXT)
        assert field_type(t) is t

    def test_scalar_has_no_entity_ref(self):
        assert field_type(str).entity_ref is None

    def test_unknown_kind_rejected(self):
        with pytest.raises(RegistryError, match="Unsupported field kind"):
            field_type(FieldType("bogus"))

    def test_entity_without_ref_rejected(self):
        with pytest.raises(RegistryError, match="non-empty"):
            field_type(FieldType(ENTITY))

    def test_array_without_item_rejected(self):
        with pytest.raises(RegistryError, match="requires an element type"):
            field_type(FieldType(ARRAY))

    def test_array_with_bad_item_rejected(self):
        with pytest.raises(RegistryError, match="Unsupported field kind"):
            field_type(FieldType(ARRAY, item=FieldType("bogus")))

    def test_define_rejects_bad_fieldtype(self, reg):
        with pytest.raises(RegistryError, match="Agent.Drives: Array field type"):
            reg.define("Agent", fields=[
                ("Drives", FieldType(ARRAY), False, False),
            ])
        assert not reg.has("Agent")


# ===========================================================================
# C. Lookup
# ===========================================================================

class TestLookup:

    def test_get_existing(self, desk_reg):
        entity = desk_reg.get("Ticket")
        assert entity.name == "Ticket"
        assert len(entity.fields) == 7

    def test_get_missing_raises_configuration_error(self, desk_reg):
        with pytest.raises(ConfigurationError, match="not defined"):
            desk_reg.get("Nonexistent")

    def test_configuration_error_is_registry_error(self):
        assert issubclass(ConfigurationError, RegistryError)

    def test_has(self, desk_reg):
        assert desk_reg.has("Ticket")
        assert not desk_reg.has("Nonexistent")
        assert "Person" in desk_reg
        assert len(desk_reg) == 3

    def test_entities_in_definition_order(self, desk_reg):
        assert desk_reg.entities() == ["Ticket", "Person", "Envelope"]

    def test_fields_for(self, desk_reg):
        names = [f.name for f in desk_reg.fields_for("Person")]
        assert names == ["Name", "Attributes"]

    def test_field(self, desk_reg):
        f = desk_reg.field("Ticket", "Summary")
        assert isinstance(f, FieldDef)
        assert f.entity == "Ticket"
        assert f.position == 1

    def test_field_unknown_field_raises(self, desk_reg):
        with pytest.raises(RegistryError, match="not declared"):
            desk_reg.field("Ticket", "Bogus")

    def test_field_unknown_entity_raises(self, desk_reg):
        with pytest.raises(ConfigurationError):
            desk_reg.field("Bogus", "Summary")

    def test_fields_are_immutable(self, desk_reg):
        f = desk_reg.field("Ticket", "Summary")
        with pytest.raises(AttributeError):
            f.sortable = True


# ===========================================================================
# D. Filterable / Sortable Views
# ===========================================================================

class TestQueryViews:

    def test_filterable_in_declaration_order(self, desk_reg):
        names = [f.name for f in desk_reg.filterable_fields("Ticket")]
        assert names == ["TicketId", "Summary", "Created"]

    def test_sortable_in_declaration_order(self, desk_reg):
        names = [f.name for f in desk_reg.sortable_fields("Ticket")]
        assert names == ["TicketId", "Created", "LastModified"]

    def test_unflagged(self, desk_reg):
        names = [f.name for f in desk_reg.unflagged_fields("Ticket")]
        assert names == ["Phone", "Owner", "Watchers"]

    def test_filterable_not_sortable(self, desk_reg):
        summary = desk_reg.field("Ticket", "Summary")
        assert summary in desk_reg.filterable_fields("Ticket")
        assert summary not in desk_reg.sortable_fields("Ticket")

    def test_sortable_not_filterable(self, desk_reg):
        modified = desk_reg.field("Ticket", "LastModified")
        assert modified in desk_reg.sortable_fields("Ticket")
        assert modified not in desk_reg.filterable_fields("Ticket")

    def test_empty_views(self, desk_reg):
        assert desk_reg.filterable_fields("Envelope") == ()
        assert desk_reg.sortable_fields("Envelope") == ()

    def test_repeated_calls_identical(self, desk_reg):
        first = desk_reg.filterable_fields("Ticket")
        assert desk_reg.filterable_fields("Ticket") == first
        assert desk_reg.sortable_fields("Ticket") == \
            desk_reg.sortable_fields("Ticket")

    def test_unknown_entity_raises(self, desk_reg):
        with pytest.raises(ConfigurationError):
            desk_reg.filterable_fields("Nonexistent")
        with pytest.raises(ConfigurationError):
            desk_reg.sortable_fields("Nonexistent")


# ===========================================================================
# E. Eligibility Checks
# ===========================================================================

class TestEligibility:

    def test_check_filter_ok(self, desk_reg):
        assert desk_reg.check_filter("Ticket", "Summary").name == "Summary"

    def test_check_filter_rejects(self, desk_reg):
        with pytest.raises(RegistryError, match="Ticket.Phone.*not filterable"):
            desk_reg.check_filter("Ticket", "Phone")

    def test_check_sort_ok(self, desk_reg):
        assert desk_reg.check_sort("Ticket", "LastModified").sortable

    def test_check_sort_rejects(self, desk_reg):
        with pytest.raises(RegistryError, match="Ticket.Summary.*not sortable"):
            desk_reg.check_sort("Ticket", "Summary")

    def test_check_unknown_field(self, desk_reg):
        with pytest.raises(RegistryError, match="not declared"):
            desk_reg.check_filter("Ticket", "Bogus")


# ===========================================================================
# F. Composition
# ===========================================================================

class TestComposition:

    def test_references_deduplicated(self, desk_reg):
        assert desk_reg.references("Ticket") == ["Person"]

    def test_references_none(self, desk_reg):
        assert desk_reg.references("Person") == []

    def test_validate_ok(self, desk_reg):
        desk_reg.validate()

    def test_validate_lists_dangling(self, reg):
        reg.define("Asset", fields=[
            ("Found", array_of("DeviceFound"), False, False),
            ("Probe", "Probe", False, False),
        ])
        with pytest.raises(RegistryError) as exc:
            reg.validate()
        assert "Asset.Found -> DeviceFound" in str(exc.value)
        assert "Asset.Probe -> Probe" in str(exc.value)

    def test_forward_reference_resolves_after_define(self, reg):
        reg.define("Asset", fields=[("Probe", "Probe", False, False)])
        reg.define("Probe", fields=[("ProbeId", float, True, False)])
        reg.validate()


# ===========================================================================
# G. Freezing
# ===========================================================================

class TestFreeze:

    def test_not_frozen_by_default(self, reg):
        assert not reg.frozen

    def test_frozen_rejects_define(self, desk_reg):
        desk_reg.freeze()
        assert desk_reg.frozen
        with pytest.raises(RegistryError, match="frozen"):
            desk_reg.define("Late", fields=[])

    def test_frozen_still_readable(self, desk_reg):
        desk_reg.freeze()
        assert len(desk_reg.filterable_fields("Ticket")) == 3

    def test_freeze_logs_counts(self, desk_reg, caplog):
        with caplog.at_level(logging.INFO, logger="kschema.registry"):
            desk_reg.freeze()
        assert "3 entities, 10 fields" in caplog.text


# ===========================================================================
# H. Introspection
# ===========================================================================

class TestIntrospection:

    def test_entities_with(self, desk_reg):
        assert desk_reg.entities_with("Name") == ["Person"]
        assert desk_reg.entities_with("Status") == ["Envelope"]
        assert desk_reg.entities_with("Bogus") == []

    def test_to_dict(self, desk_reg):
        data = desk_reg.to_dict()
        assert list(data) == ["Ticket", "Person", "Envelope"]
        ticket = data["Ticket"]
        assert ticket["category"] == "service_desk"
        assert ticket["description"] == "Service desk ticket"
        assert ticket["fields"][1] == {
            "name": "Summary",
            "type": "text",
            "filterable": True,
            "sortable": False,
        }
        assert ticket["fields"][6]["type"] == "Person[]"

    def test_to_dict_returns_copy(self, desk_reg):
        data = desk_reg.to_dict()
        data["Ticket"]["fields"].clear()
        assert len(desk_reg.fields_for("Ticket")) == 7
