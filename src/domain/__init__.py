"""Domain layer: errors, constants and schemas."""

from .errors import ErrorCodes, ShellError
from .schemas import (
    FinalMetadata,
    HtmlParts,
    RenderOptions,
    ShellEnvironment,
)

__all__ = [
    "ErrorCodes",
    "ShellError",
    "FinalMetadata",
    "HtmlParts",
    "RenderOptions",
    "ShellEnvironment",
]
