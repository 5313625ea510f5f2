import sys
from pprint import pformat

from ._config import get_config


def inner_repr(value: object) -> str:
    cfg = get_config()
    if isinstance(value, str | bytes) or (
        cfg.repr_width is None and cfg.repr_depth is None
    ):
        return repr(value)
    return pformat(
        value,
        depth=cfg.repr_depth,
        width=cfg.repr_width or sys.maxsize,
        compact=cfg.repr_compact,
        sort_dicts=False,
    )
