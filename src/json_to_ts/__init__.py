"""json-to-ts - infer TypeScript declarations from example JSON"""

__version__ = "0.1.0"

from json_to_ts.exceptions import (
    InputFileNotFoundError,
    InvalidInputError,
    JsonToTsError,
    MissingInputError,
)
from json_to_ts.generator import JsonToTypeScript, convert, infer, render
from json_to_ts.models import ConverterOptions, InferenceResult


__all__ = [
    "ConverterOptions",
    "InferenceResult",
    "InputFileNotFoundError",
    "InvalidInputError",
    "JsonToTsError",
    "JsonToTypeScript",
    "MissingInputError",
    "__version__",
    "convert",
    "infer",
    "render",
]
