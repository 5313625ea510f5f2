from ._option import NONE, NoneOption, Option, OptionShapeError, Some
from ._result import Err, Ok, Result, ResultShapeError

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionShapeError",
    "Result",
    "ResultShapeError",
    "Some",
]
