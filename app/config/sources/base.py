from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, Tuple, Type

from pack_mockup.config import RenderConfig
from pack_mockup.schema import CustomizationSchema, Template
from pack_mockup.session import CustomizerSession

TemplateEntry = Tuple[Template, CustomizationSchema]


class SourceConfig(Protocol):
    render_config: RenderConfig


@dataclass(frozen=True)
class TemplateSource:
    """Where templates come from (built-in samples, a catalog file, ...).

    A source only knows how to configure itself through widgets and how to
    resolve a config to a template. Sessions are opened by the registry so
    every source gets the same render settings handling.

    Attributes:
        name: Label shown in the source select box.
        config_type: Frozen dataclass holding this source's settings.
        initial_config: Zero-arg callable returning default settings.
        build_config: (current_config) -> new_config, renders Streamlit widgets.
        load_template: (config) -> (template, schema); raises ValueError when
            the config does not resolve to a template.
        is_default: Whether the app starts on this source.
    """

    name: str
    config_type: Type[Any]
    initial_config: Callable[[], SourceConfig]
    build_config: Callable[[Any], SourceConfig]
    load_template: Callable[[Any], TemplateEntry]
    is_default: bool = False


class TemplateSourceRegistry:
    """Template sources in registration order, keyed by name."""

    def __init__(self) -> None:
        self._sources: Dict[str, TemplateSource] = {}

    def register(self, source: TemplateSource) -> TemplateSource:
        # Re-registering under the same name (hot reload) keeps its slot
        self._sources[source.name] = source
        return source

    @property
    def sources(self) -> List[TemplateSource]:
        return list(self._sources.values())

    @property
    def names(self) -> List[str]:
        return list(self._sources)

    def get(self, name: str) -> TemplateSource:
        return self._sources[name]

    def for_config(self, config: object) -> TemplateSource:
        for source in self._sources.values():
            if isinstance(config, source.config_type):
                return source
        raise ValueError(
            f"No registered template source for config type: {type(config).__name__}"
        )

    @property
    def default(self) -> TemplateSource:
        if not self._sources:
            raise LookupError("No template sources registered")
        return next(
            (s for s in self._sources.values() if s.is_default),
            self.sources[0],
        )

    def default_config(self) -> SourceConfig:
        return self.default.initial_config()

    def open_session(self, config: SourceConfig) -> CustomizerSession:
        """Resolve ``config`` through its source and start a session on it."""
        template, schema = self.for_config(config).load_template(config)
        return CustomizerSession(template, schema, config=config.render_config)


TEMPLATE_SOURCES = TemplateSourceRegistry()
