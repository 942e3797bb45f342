"""result-match - outcomes as data, consumed by dispatch instead of exceptions"""

__version__ = "0.1.0"

from . import classes, tagged
from .convert import from_tagged, to_tagged
from .exceptions import ErrorType, MalformedResultError, ResultError, UnwrapError
from .tagged import Failure, Result, Success, Tag, result

__all__ = [
    # Tagged union (default encoding)
    "Result",
    "Success",
    "Failure",
    "Tag",
    "result",
    # Encodings as modules
    "tagged",
    "classes",
    # Conversion
    "to_tagged",
    "from_tagged",
    # Exceptions
    "ResultError",
    "ErrorType",
    "MalformedResultError",
    "UnwrapError",
]
