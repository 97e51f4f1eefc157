"""Application settings: navigation layout, tab configuration and colour themes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any

from .tabs import Tab

DEFAULT_SETTINGS_PATH = "app_settings.json"

Color = tuple[int, int, int, int]


class NavigationLayout(Enum):
    """Where the tab navigation is drawn."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"


@dataclass(frozen=True)
class ColorTheme:
    """The eight RGBA colours that make up a theme."""

    background: Color = (32, 32, 32, 255)
    navigation_background: Color = (48, 48, 48, 255)
    active_tab: Color = (68, 68, 68, 255)
    inactive_tab: Color = (96, 96, 96, 255)
    text_primary: Color = (255, 255, 255, 255)
    text_secondary: Color = (180, 180, 180, 255)
    accent: Color = (69, 74, 108, 255)
    panel_background: Color = (40, 40, 40, 255)

    def to_dict(self) -> dict[str, list[int]]:
        """Return the theme as a JSON-ready mapping of colour lists."""
        return {f.name: list(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> ColorTheme:
        """Build a theme from a mapping of colour lists; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("colour theme must be an object")
        values = {}
        for f in fields(cls):
            if f.name not in data:
                raise ValueError(f"missing colour {f.name!r}")
            values[f.name] = _parse_color(data[f.name], f.name)
        return cls(**values)


def _parse_color(value: Any, name: str) -> Color:
    if not isinstance(value, (list, tuple)) or len(value) != 4:
        raise ValueError(f"colour {name!r} must have four components")
    for component in value:
        if isinstance(component, bool) or not isinstance(component, int) or not 0 <= component <= 255:
            raise ValueError(f"colour {name!r} has an invalid component: {component!r}")
    return (value[0], value[1], value[2], value[3])


class PresetTheme(Enum):
    """Built-in colour themes, plus Custom for user-chosen colours."""

    DEFAULT = "Default"
    DARK = "Dark"
    OCEAN = "Ocean"
    FOREST = "Forest"
    SUNSET = "Sunset"
    PURPLE = "Purple"
    CUSTOM = "Custom"

    def colors(self) -> ColorTheme:
        """Return the colours of this preset; Default and Custom give the default theme."""
        return _PRESET_COLORS.get(self, ColorTheme())


_PRESET_COLORS: dict[PresetTheme, ColorTheme] = {
    PresetTheme.DARK: ColorTheme(
        background=(18, 18, 18, 255),
        navigation_background=(28, 28, 28, 255),
        active_tab=(64, 128, 255, 255),
        inactive_tab=(128, 128, 128, 255),
        text_primary=(255, 255, 255, 255),
        text_secondary=(200, 200, 200, 255),
        accent=(69, 74, 108, 255),
        panel_background=(32, 32, 32, 255),
    ),
    PresetTheme.OCEAN: ColorTheme(
        background=(25, 42, 86, 255),
        navigation_background=(30, 50, 100, 255),
        active_tab=(100, 200, 255, 255),
        inactive_tab=(150, 150, 180, 255),
        text_primary=(240, 248, 255, 255),
        text_secondary=(200, 220, 240, 255),
        accent=(100, 200, 255, 255),
        panel_background=(35, 55, 110, 255),
    ),
    PresetTheme.FOREST: ColorTheme(
        background=(34, 49, 34, 255),
        navigation_background=(45, 60, 45, 255),
        active_tab=(144, 238, 144, 255),
        inactive_tab=(128, 128, 128, 255),
        text_primary=(240, 255, 240, 255),
        text_secondary=(200, 220, 200, 255),
        accent=(144, 238, 144, 255),
        panel_background=(40, 55, 40, 255),
    ),
    PresetTheme.SUNSET: ColorTheme(
        background=(60, 30, 30, 255),
        navigation_background=(80, 40, 40, 255),
        active_tab=(255, 165, 0, 255),
        inactive_tab=(200, 150, 100, 255),
        text_primary=(255, 240, 220, 255),
        text_secondary=(220, 200, 180, 255),
        accent=(255, 165, 0, 255),
        panel_background=(70, 35, 35, 255),
    ),
    PresetTheme.PURPLE: ColorTheme(
        background=(45, 35, 65, 255),
        navigation_background=(55, 45, 75, 255),
        active_tab=(186, 85, 211, 255),
        inactive_tab=(150, 120, 170, 255),
        text_primary=(248, 240, 255, 255),
        text_secondary=(220, 200, 240, 255),
        accent=(186, 85, 211, 255),
        panel_background=(50, 40, 70, 255),
    ),
}

_DEFAULT_NAMES: dict[Tab, str] = {
    Tab.TIMER: "Timer",
    Tab.STATS: "Statistics",
    Tab.RECORD: "Record",
    Tab.GRAPH: "Graph",
    Tab.TODO: "Todo",
    Tab.FLASHCARDS: "Flashcards",
    Tab.CALCULATOR: "Calculator",
    Tab.MARKDOWN: "Markdown",
    Tab.REMINDER: "Reminder",
    Tab.TERMINAL: "Terminal",
    Tab.SETTINGS: "Settings",
}


@dataclass
class TabConfig:
    """Whether a tab kind is offered and what it is called."""

    tab_type: Tab
    enabled: bool
    custom_name: str | None = None

    def display_name(self) -> str:
        """Return the custom name if set, else the default one."""
        return self.custom_name if self.custom_name is not None else self.default_name()

    def default_name(self) -> str:
        """Return the built-in name of the tab kind."""
        return _DEFAULT_NAMES[self.tab_type]

    def _to_dict(self) -> dict[str, Any]:
        return {
            "tab_type": self.tab_type.value,
            "enabled": self.enabled,
            "custom_name": self.custom_name,
        }

    @classmethod
    def _from_dict(cls, data: Any) -> TabConfig:
        if not isinstance(data, dict):
            raise ValueError("tab config must be an object")
        enabled = data["enabled"]
        if not isinstance(enabled, bool):
            raise ValueError("tab config 'enabled' must be a boolean")
        custom_name = data["custom_name"]
        if custom_name is not None and not isinstance(custom_name, str):
            raise ValueError("tab config 'custom_name' must be a string or null")
        return cls(Tab(data["tab_type"]), enabled, custom_name)


_DEFAULT_TAB_ORDER = (
    Tab.TIMER,
    Tab.RECORD,
    Tab.STATS,
    Tab.GRAPH,
    Tab.TODO,
    Tab.FLASHCARDS,
    Tab.REMINDER,
    Tab.CALCULATOR,
    Tab.MARKDOWN,
    Tab.TERMINAL,
    Tab.SETTINGS,
)

# The order used by reset_tab_order; it has no place for Flashcards.
_RESET_TAB_ORDER = (
    Tab.TIMER,
    Tab.RECORD,
    Tab.STATS,
    Tab.GRAPH,
    Tab.TODO,
    Tab.REMINDER,
    Tab.CALCULATOR,
    Tab.MARKDOWN,
    Tab.TERMINAL,
    Tab.SETTINGS,
)

_ALL_TABS = (
    Tab.TIMER,
    Tab.RECORD,
    Tab.STATS,
    Tab.GRAPH,
    Tab.TODO,
    Tab.REMINDER,
    Tab.FLASHCARDS,
    Tab.CALCULATOR,
    Tab.MARKDOWN,
    Tab.TERMINAL,
    Tab.SETTINGS,
)


def _default_tab_configs() -> list[TabConfig]:
    return [TabConfig(tab, True) for tab in _DEFAULT_TAB_ORDER]


@dataclass
class AppSettings:
    """User settings, stored as JSON."""

    navigation_layout: NavigationLayout = NavigationLayout.HORIZONTAL
    tab_configs: list[TabConfig] = field(default_factory=_default_tab_configs)
    theme_preset: PresetTheme = PresetTheme.DEFAULT
    custom_colors: ColorTheme = field(default_factory=ColorTheme)

    @classmethod
    def load(cls, path: str | Path = DEFAULT_SETTINGS_PATH) -> AppSettings:
        """Read settings from a file, or return defaults when it does not exist.

        Tab kinds missing from the file are appended, enabled.
        Raises ValueError when the file is not valid settings JSON.
        """
        settings_path = Path(path)
        if not settings_path.exists():
            return cls()
        text = settings_path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid settings file: {exc}") from exc
        settings = cls.from_dict(data)
        settings._ensure_all_tabs_present()
        return settings

    def save(self, path: str | Path = DEFAULT_SETTINGS_PATH) -> None:
        """Write settings as indented JSON, replacing the file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a JSON-ready mapping."""
        return {
            "navigation_layout": self.navigation_layout.value,
            "tab_configs": [config._to_dict() for config in self.tab_configs],
            "theme_preset": self.theme_preset.value,
            "custom_colors": self.custom_colors.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> AppSettings:
        """Build settings from a mapping; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("settings must be an object")
        try:
            configs = data["tab_configs"]
            if not isinstance(configs, list):
                raise ValueError("'tab_configs' must be a list")
            return cls(
                navigation_layout=NavigationLayout(data["navigation_layout"]),
                tab_configs=[TabConfig._from_dict(item) for item in configs],
                theme_preset=PresetTheme(data["theme_preset"]),
                custom_colors=ColorTheme.from_dict(data["custom_colors"]),
            )
        except KeyError as exc:
            raise ValueError(f"missing settings field {exc.args[0]!r}") from exc
        except TypeError as exc:
            raise ValueError(f"invalid settings: {exc}") from exc

    def current_colors(self) -> ColorTheme:
        """Return the custom colours when Custom is chosen, else the preset's."""
        if self.theme_preset is PresetTheme.CUSTOM:
            return self.custom_colors
        return self.theme_preset.colors()

    def is_tab_enabled(self, tab: Tab) -> bool:
        """Tell whether a tab kind is enabled; Settings always is."""
        if tab is Tab.SETTINGS:
            return True
        config = self.tab_config(tab)
        return config.enabled if config is not None else False

    def first_enabled_tab(self) -> Tab:
        """Return the first enabled tab kind, or Settings when none is."""
        return next((c.tab_type for c in self.tab_configs if c.enabled), Tab.SETTINGS)

    def enabled_tabs(self) -> list[TabConfig]:
        """Return the enabled tab configurations in order."""
        return [config for config in self.tab_configs if config.enabled]

    def tab_config(self, tab: Tab) -> TabConfig | None:
        """Return the configuration of a tab kind, if present."""
        return next((c for c in self.tab_configs if c.tab_type is tab), None)

    def move_tab_up(self, index: int) -> None:
        """Swap the tab at index with the one before it; out of range does nothing."""
        if 0 < index < len(self.tab_configs):
            configs = self.tab_configs
            configs[index - 1], configs[index] = configs[index], configs[index - 1]

    def move_tab_down(self, index: int) -> None:
        """Swap the tab at index with the one after it; out of range does nothing."""
        if 0 <= index < len(self.tab_configs) - 1:
            configs = self.tab_configs
            configs[index], configs[index + 1] = configs[index + 1], configs[index]

    def reset_tab_name(self, tab: Tab) -> None:
        """Drop the custom name of a tab kind."""
        config = self.tab_config(tab)
        if config is not None:
            config.custom_name = None

    def reset_tab_order(self) -> None:
        """Put the tab configurations back into the standard order, keeping their settings.

        Kinds that the standard order does not list are dropped.
        """
        self.tab_configs = [
            config for config in (self.tab_config(tab) for tab in _RESET_TAB_ORDER) if config is not None
        ]

    def _ensure_all_tabs_present(self) -> None:
        for tab in _ALL_TABS:
            if self.tab_config(tab) is None:
                self.tab_configs.append(TabConfig(tab, True))