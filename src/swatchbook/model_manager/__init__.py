"""Generic building blocks for managing Pydantic models.

- **PydanticPersistence**: load/save Pydantic models to JSON with backups
- **ObserverManager**: generic observer registry used by the services
"""

from swatchbook.model_manager.observer import ObserverManager
from swatchbook.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
