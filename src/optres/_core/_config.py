from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(slots=True)
class Config:
    """Process-wide settings for optres.

    The instance returned by `get_config()` is shared, so mutating it affects every subsequent call.

    Attributes:
        repr_width (int | None): Line width at which a contained value is wrapped in `repr()`, `None` to never wrap. A contained string is never wrapped.
        repr_depth (int | None): Maximum nesting depth rendered, `None` for no limit.
        repr_compact (bool): Pack as many sequence items as fit on each line when wrapping.

    Example:
    ```python
    >>> import optres as opt
    >>> cfg = opt.get_config()
    >>> cfg.repr_depth = 1
    >>> opt.Some([[1, 2], [3]])
    Some([[...], [...]])
    >>> cfg.reset()
    >>> opt.Some([[1, 2], [3]])
    Some([[1, 2], [3]])

    ```
    """

    repr_width: int | None = None
    repr_depth: int | None = None
    repr_compact: bool = True

    def reset(self) -> None:
        """Restore every setting to its default value."""
        for field in fields(self):
            setattr(self, field.name, field.default)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
