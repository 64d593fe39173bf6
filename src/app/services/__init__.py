from .definitions import EntityDefinition
from .entity_service import EntityService

__all__ = ["EntityDefinition", "EntityService"]
