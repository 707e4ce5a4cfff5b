"""Statement format registry - maps format names to renderers"""

import logging
from typing import Dict, List

from rental_store.domain.exceptions import DuplicateFormatError, UnknownFormatError
from rental_store.infrastructure.observability.metrics import format_fallback_counter
from rental_store.rendering.base import StatementRenderer
from rental_store.rendering.markup import HtmlRenderer
from rental_store.rendering.plain import PlainRenderer

logger = logging.getLogger(__name__)


def normalize_format_name(name: str | None) -> str:
    return (name or "").strip().lower()


class RendererRegistry:
    """
    Explicit name -> renderer mapping with a fixed fallback entry.

    Requirements:
    - Names are matched case-insensitively, ignoring surrounding whitespace
    - resolve() never fails: unknown names log a warning and get the fallback
    - get() is the strict lookup and raises UnknownFormatError
    """

    def __init__(self, fallback: StatementRenderer):
        self._renderers: Dict[str, StatementRenderer] = {}
        self.fallback_name = normalize_format_name(fallback.name)
        self.register(fallback.name, fallback)

    def register(self, name: str, renderer: StatementRenderer, replace: bool = False) -> None:
        key = normalize_format_name(name)
        if not key:
            raise ValueError("Format name must not be empty")
        if key in self._renderers and not replace:
            raise DuplicateFormatError(key)
        self._renderers[key] = renderer

    def get(self, name: str) -> StatementRenderer:
        key = normalize_format_name(name)
        try:
            return self._renderers[key]
        except KeyError:
            raise UnknownFormatError(key) from None

    def resolve(self, name: str | None) -> StatementRenderer:
        """Renderer for ``name``, or the fallback renderer when it is not registered"""
        try:
            return self.get(name)
        except UnknownFormatError:
            format_fallback_counter.inc()
            logger.warning(
                f"Unknown statement format {name!r}, falling back to {self.fallback_name!r}",
                extra={"requested_format": name, "fallback_format": self.fallback_name},
            )
            return self._renderers[self.fallback_name]

    @property
    def formats(self) -> List[str]:
        return sorted(self._renderers)

    def __contains__(self, name: str) -> bool:
        return normalize_format_name(name) in self._renderers


def default_registry() -> RendererRegistry:
    """Registry with the built-in plain and html formats; plain is the fallback"""
    registry = RendererRegistry(fallback=PlainRenderer())
    registry.register(HtmlRenderer.name, HtmlRenderer())
    return registry
