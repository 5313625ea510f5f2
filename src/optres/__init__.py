"""Rust-style `Option` and `Result` types for Python.

Absence (`NONE`) and failure (`Err`) are ordinary values, composed with combinators instead of `None` checks and `try` blocks.
"""

import logging

from ._core import Config, get_config
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionShapeError,
    Result,
    ResultShapeError,
    Some,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionShapeError",
    "Result",
    "ResultShapeError",
    "Some",
    "get_config",
]
