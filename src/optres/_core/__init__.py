from ._config import Config, get_config
from ._format import inner_repr
from ._main import Pipeable

__all__ = ["Config", "Pipeable", "get_config", "inner_repr"]
