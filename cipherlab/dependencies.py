from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cipherlab.core.config import Settings, get_settings
from cipherlab.services.engines.registry import EngineRegistry


@lru_cache
def get_registry() -> EngineRegistry:
    """Shared engine registry over the default alphabet."""
    return EngineRegistry()


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Engine registry dependency
RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
