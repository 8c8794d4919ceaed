from dataclasses import dataclass

import pytest

pytest.importorskip("streamlit")

from app.config.sources.base import (  # noqa: E402
    TEMPLATE_SOURCES,
    TemplateSource,
    TemplateSourceRegistry,
)
from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig  # noqa: E402
from pack_mockup.examples.templates import juice_pouch, rice_package  # noqa: E402


@dataclass(frozen=True)
class _RiceConfig:
    render_config: RenderConfig


@dataclass(frozen=True)
class _JuiceConfig:
    render_config: RenderConfig


def _source(name: str, config_type: type, loader, is_default: bool = False) -> TemplateSource:
    return TemplateSource(
        name=name,
        config_type=config_type,
        initial_config=lambda: config_type(DEFAULT_RENDER_CONFIG),
        build_config=lambda current: current,
        load_template=loader,
        is_default=is_default,
    )


def _registry() -> TemplateSourceRegistry:
    registry = TemplateSourceRegistry()
    registry.register(_source("Rice", _RiceConfig, lambda cfg: rice_package()))
    registry.register(
        _source("Juice", _JuiceConfig, lambda cfg: juice_pouch(), is_default=True)
    )
    return registry


def test_default_source_prefers_flagged_source() -> None:
    registry = _registry()
    assert registry.names == ["Rice", "Juice"]
    assert registry.default.name == "Juice"
    assert isinstance(registry.default_config(), _JuiceConfig)


def test_default_source_falls_back_to_first_registered() -> None:
    registry = TemplateSourceRegistry()
    registry.register(_source("Rice", _RiceConfig, lambda cfg: rice_package()))
    assert registry.default.name == "Rice"


def test_empty_registry_has_no_default() -> None:
    with pytest.raises(LookupError):
        TemplateSourceRegistry().default_config()


def test_reregistering_replaces_source_in_place() -> None:
    registry = _registry()
    registry.register(_source("Rice", _RiceConfig, lambda cfg: juice_pouch()))
    assert registry.names == ["Rice", "Juice"]
    assert registry.get("Rice").load_template(None)[0].id == "fresh-juice-pouch"


def test_open_session_uses_config_render_settings() -> None:
    registry = _registry()
    render_config = RenderConfig(max_view_width=300, max_view_height=300)
    session = registry.open_session(_RiceConfig(render_config))
    try:
        assert session.template.id == "premium-rice-package"
        assert session.config is render_config
    finally:
        session.close()


def test_unknown_config_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        _registry().for_config(object())


def test_builtin_sources_start_on_samples() -> None:
    assert TEMPLATE_SOURCES.names == ["Sample Templates", "JSON Catalog"]
    config = TEMPLATE_SOURCES.default_config()
    assert TEMPLATE_SOURCES.for_config(config).name == "Sample Templates"
    session = TEMPLATE_SOURCES.open_session(config)
    try:
        assert session.template.id == "premium-rice-package"
    finally:
        session.close()
