"""
Entity catalog — the single source of truth for all remote entity types.

Exports REGISTRY, the global EntityRegistry populated from the procedure,
service desk, audit, patch, agent, asset, log and system domains. The
registry is validated and frozen once every domain module has loaded.
"""

from kschema.registry import EntityRegistry

REGISTRY = EntityRegistry()

# Import domain modules to populate the registry
from kschema.entities import procedures    # noqa: F401, E402
from kschema.entities import service_desk  # noqa: F401, E402
from kschema.entities import audit         # noqa: F401, E402
from kschema.entities import patch         # noqa: F401, E402
from kschema.entities import agents        # noqa: F401, E402
from kschema.entities import assets        # noqa: F401, E402
from kschema.entities import logs          # noqa: F401, E402
from kschema.entities import system        # noqa: F401, E402

REGISTRY.validate()
REGISTRY.freeze()


def filterable_fields(entity_type: str) -> tuple:
    """Filterable fields of a catalogued entity type, in declaration order."""
    return REGISTRY.filterable_fields(entity_type)


def sortable_fields(entity_type: str) -> tuple:
    """Sortable fields of a catalogued entity type, in declaration order."""
    return REGISTRY.sortable_fields(entity_type)
