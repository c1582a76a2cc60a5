"""Custom type-template resolution for the code generator."""

from .resolver import (
    DEFAULT_TEMPLATE_EXTENSION,
    DirectoryTemplateResolver,
    NullTemplateResolver,
    StaticTemplateResolver,
    TypeTemplateResolver,
)

__all__ = [
    "DEFAULT_TEMPLATE_EXTENSION",
    "TypeTemplateResolver",
    "NullTemplateResolver",
    "StaticTemplateResolver",
    "DirectoryTemplateResolver",
]
