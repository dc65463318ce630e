"""ContextVar-based render configuration for Sapling.

Holds the presentation settings consumed by the styled renderer: which color
each syntax category gets, and whether to switch to the per-node debug
coloring. Loading a scheme from user files is the host application's job;
it hands the result over through ``RenderConfig.from_dict`` or
``set_render_config``.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so a host rendering in several threads needs no locks.

Usage:
    from sapling.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(debug_highlighting=True)):
        styled = StyledRenderer().render(root, JsonFormat.PRETTY)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.style import Style

from sapling.tokens import DEFAULT, SyntaxCategory

_DEFAULT_COLORS: dict[SyntaxCategory, str] = {
    "default": "white",
    "const": "red",
    "literal": "yellow",
    "comment": "green",
    "ident": "cyan",
    "keyword": "blue",
    "preproc": "magenta",
    "type": "bright_yellow",
    "special": "bright_green",
    "underlined": "bright_red",
    "error": "bright_red",
}


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """Immutable mapping from syntax categories to colors.

    Colors are any color string ``rich`` understands (names like ``"red"``,
    ``"bright_yellow"``, or hex like ``"#ff8800"``). Unknown categories fall
    back to the ``"default"`` entry, and to an unstyled Style if there is no
    default entry either.

    Example:
        >>> scheme = ColorScheme.default()
        >>> scheme.color_for("const")
        'red'
        >>> scheme.color_for("no-such-category")
        'white'

    """

    colors: Mapping[SyntaxCategory, str] = field(
        default_factory=lambda: MappingProxyType(dict(_DEFAULT_COLORS))
    )

    def __post_init__(self) -> None:
        # Freeze caller-supplied dicts
        if not isinstance(self.colors, MappingProxyType):
            object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    @classmethod
    def default(cls) -> "ColorScheme":
        """Return the standard color scheme."""
        return cls()

    def color_for(self, category: SyntaxCategory) -> str | None:
        """Color for ``category``, falling back to the default entry."""
        return self.colors.get(category, self.colors.get(DEFAULT))

    def style_for(self, category: SyntaxCategory) -> Style:
        """Rich style for ``category``; never raises for unknown names."""
        color = self.color_for(category)
        if color is None:
            return Style()
        return Style(color=color)

    def with_overrides(self, overrides: Mapping[SyntaxCategory, str]) -> "ColorScheme":
        """Return a new scheme with ``overrides`` layered on top."""
        return ColorScheme({**self.colors, **overrides})


# Palette for debug highlighting, indexed by node hash
DEBUG_PALETTE: tuple[str, ...] = (
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        color_scheme: Category-to-color mapping for styled output
        debug_highlighting: Color every token by the structural hash of the
            node that emitted it instead of by category. Useless for editing,
            very useful for seeing where node boundaries fall.

    """

    color_scheme: ColorScheme = field(default_factory=ColorScheme.default)
    debug_highlighting: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        ``color_scheme`` may be a mapping of category to color; it is layered
        over the default scheme. Unknown keys are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "color_scheme": {"keyword": "bright_blue"},
            ...     "debug_highlighting": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.color_scheme.color_for("keyword")
            'bright_blue'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        scheme = filtered.get("color_scheme")
        if scheme is not None and not isinstance(scheme, ColorScheme):
            filtered["color_scheme"] = ColorScheme.default().with_overrides(scheme)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.
    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEBUG_PALETTE",
    "ColorScheme",
    "RenderConfig",
    "get_render_config",
    "reset_render_config",
    "render_config_context",
    "set_render_config",
]
