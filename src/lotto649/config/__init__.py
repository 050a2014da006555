"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import GeneratorConfig

__all__ = ["ConfigLoadError", "GeneratorConfig", "load_config"]
