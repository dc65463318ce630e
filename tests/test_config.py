"""Tests for ContextVar-based render configuration.

Validates the color scheme fallbacks, from_dict layering, thread isolation
and context manager behavior.
"""

from threading import Thread

import pytest
from rich.style import Style

from sapling import (
    ColorScheme,
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from sapling.tokens import STANDARD_CATEGORIES


@pytest.fixture(autouse=True)
def _clean_config():  # type: ignore[no-untyped-def]
    reset_render_config()
    yield
    reset_render_config()


class TestColorScheme:
    """Test category-to-color lookups."""

    def test_every_standard_category_has_a_color(self) -> None:
        scheme = ColorScheme.default()
        for category in STANDARD_CATEGORIES:
            assert category in scheme.colors

    def test_known_categories(self) -> None:
        scheme = ColorScheme.default()
        assert scheme.color_for("const") == "red"
        assert scheme.color_for("literal") == "yellow"
        assert scheme.style_for("keyword") == Style(color="blue")

    def test_unknown_category_uses_default(self) -> None:
        scheme = ColorScheme.default()
        assert scheme.color_for("no-such-category") == "white"
        assert scheme.style_for("no-such-category") == Style(color="white")

    def test_no_default_entry_gives_plain_style(self) -> None:
        scheme = ColorScheme({"const": "red"})
        assert scheme.color_for("literal") is None
        assert scheme.style_for("literal") == Style()

    def test_colors_are_read_only(self) -> None:
        colors = {"default": "white"}
        scheme = ColorScheme(colors)
        colors["default"] = "black"
        assert scheme.color_for("default") == "white"
        with pytest.raises(TypeError):
            scheme.colors["default"] = "black"  # type: ignore[index]

    def test_with_overrides(self) -> None:
        base = ColorScheme.default()
        custom = base.with_overrides({"const": "#ff8800"})
        assert custom.color_for("const") == "#ff8800"
        assert custom.color_for("literal") == "yellow"
        assert base.color_for("const") == "red"


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.debug_highlighting is False
        assert config.color_scheme == ColorScheme.default()

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.debug_highlighting = True  # type: ignore[misc]


class TestFromDict:
    """Test RenderConfig.from_dict."""

    def test_empty(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()

    def test_scheme_layered_over_default(self) -> None:
        config = RenderConfig.from_dict({"color_scheme": {"keyword": "bright_blue"}})
        assert config.color_scheme.color_for("keyword") == "bright_blue"
        assert config.color_scheme.color_for("const") == "red"

    def test_scheme_instance_passed_through(self) -> None:
        scheme = ColorScheme({"default": "black"})
        config = RenderConfig.from_dict({"color_scheme": scheme})
        assert config.color_scheme is scheme

    def test_unknown_keys_ignored(self) -> None:
        config = RenderConfig.from_dict({"debug_highlighting": True, "theme": "dark"})
        assert config.debug_highlighting is True


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_default(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        custom = RenderConfig(debug_highlighting=True)
        set_render_config(custom)
        assert get_render_config() is custom
        reset_render_config()
        assert get_render_config().debug_highlighting is False


class TestRenderConfigContext:
    """Test the render_config_context manager."""

    def test_restores_previous(self) -> None:
        outer = RenderConfig(debug_highlighting=True)
        set_render_config(outer)
        with render_config_context(RenderConfig()):
            assert get_render_config().debug_highlighting is False
        assert get_render_config() is outer

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError), render_config_context(
            RenderConfig(debug_highlighting=True)
        ):
            raise RuntimeError("boom")
        assert get_render_config().debug_highlighting is False


class TestThreadIsolation:
    """Each thread sees its own config."""

    def test_other_thread_sees_default(self) -> None:
        set_render_config(RenderConfig(debug_highlighting=True))
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_render_config().debug_highlighting)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [False]
        assert get_render_config().debug_highlighting is True
