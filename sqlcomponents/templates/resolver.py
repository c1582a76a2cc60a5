"""Type-template resolution.

The model only needs to know whether a custom code-generation template exists
for a column type. How and where templates are stored is up to the host
generator, which injects a resolver into the :class:`Database`.
"""

import os
from typing import Dict, Iterable, Optional, Protocol, runtime_checkable

from ..core.error import TemplateResolutionError
from ..core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_EXTENSION = ".ftl"


@runtime_checkable
class TypeTemplateResolver(Protocol):
    """Answers whether a custom template exists for a column type."""

    def has_custom_template(self, type_name_lowercased: str) -> bool:
        """Check for a custom template.

        Args:
            type_name_lowercased: Column type name, already lowercased

        Returns:
            True if a custom template exists, False otherwise
        """
        ...


class NullTemplateResolver:
    """Resolver for generators that ship no custom type templates."""

    def has_custom_template(self, type_name_lowercased: str) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullTemplateResolver()"


class StaticTemplateResolver:
    """Resolver backed by a fixed collection of type names."""

    def __init__(self, type_names: Iterable[str]) -> None:
        self.type_names = frozenset(name.lower() for name in type_names)

    def has_custom_template(self, type_name_lowercased: str) -> bool:
        return type_name_lowercased in self.type_names

    def __repr__(self) -> str:
        return f"StaticTemplateResolver({sorted(self.type_names)!r})"


class DirectoryTemplateResolver:
    """Resolver that probes a templates directory for ``<type><extension>`` files.

    Answers are cached per type name, the directory is assumed not to change
    while a generation run is in progress. A directory that does not exist
    simply holds no templates.
    """

    def __init__(
        self,
        templates_dir: str,
        extension: str = DEFAULT_TEMPLATE_EXTENSION,
    ) -> None:
        """Initialize the resolver.

        Args:
            templates_dir: Directory holding one template file per custom type
            extension: Template file extension, including the leading dot

        Raises:
            TemplateResolutionError: If templates_dir exists but is not a directory
        """
        if os.path.exists(templates_dir) and not os.path.isdir(templates_dir):
            raise TemplateResolutionError(f"not a directory: {templates_dir}")

        self.templates_dir = templates_dir
        self.extension = extension
        self._cache: Dict[str, bool] = {}

    def template_path(self, type_name_lowercased: str) -> str:
        """Path at which the template for a type would live."""
        return os.path.join(self.templates_dir, type_name_lowercased + self.extension)

    @staticmethod
    def is_plain_name(type_name_lowercased: str) -> bool:
        """Whether a type name maps onto a single file inside the templates directory."""
        if type_name_lowercased in ("", ".", ".."):
            return False
        separators = [os.sep] + ([os.altsep] if os.altsep else [])
        return not any(sep in type_name_lowercased for sep in separators)

    def has_custom_template(self, type_name_lowercased: str) -> bool:
        cached: Optional[bool] = self._cache.get(type_name_lowercased)
        if cached is not None:
            return cached

        if not self.is_plain_name(type_name_lowercased):
            self._cache[type_name_lowercased] = False
            logger.debug("skipped type name that is not a plain file name", extra={
                "extra_fields": {"type_name": type_name_lowercased}
            })
            return False

        path = self.template_path(type_name_lowercased)
        found = os.path.isfile(path)
        self._cache[type_name_lowercased] = found

        logger.debug("probed custom type template", extra={
            "extra_fields": {
                "type_name": type_name_lowercased,
                "path": path,
                "found": found,
            }
        })
        return found

    def __repr__(self) -> str:
        return (
            f"DirectoryTemplateResolver(templates_dir={self.templates_dir!r}, "
            f"extension={self.extension!r})"
        )
