import json

import pytest

from studytimer.settings import (
    AppSettings,
    ColorTheme,
    NavigationLayout,
    PresetTheme,
    TabConfig,
)
from studytimer.tabs import Tab


def test_default_settings_first_tab_is_timer():
    settings = AppSettings()
    assert settings.first_enabled_tab() is Tab.TIMER
    assert settings.navigation_layout is NavigationLayout.HORIZONTAL
    assert settings.theme_preset is PresetTheme.DEFAULT


def test_default_tabs_cover_every_kind_once():
    settings = AppSettings()
    kinds = [c.tab_type for c in settings.tab_configs]
    assert sorted(kinds, key=lambda t: t.value) == sorted(Tab, key=lambda t: t.value)


def test_first_enabled_falls_back_to_settings():
    settings = AppSettings()
    for config in settings.tab_configs:
        config.enabled = False
    assert settings.first_enabled_tab() is Tab.SETTINGS
    assert settings.enabled_tabs() == []


def test_settings_tab_is_always_enabled():
    settings = AppSettings()
    settings.tab_config(Tab.SETTINGS).enabled = False
    settings.tab_config(Tab.TODO).enabled = False
    assert settings.is_tab_enabled(Tab.SETTINGS) is True
    assert settings.is_tab_enabled(Tab.TODO) is False
    assert Tab.TODO not in [c.tab_type for c in settings.enabled_tabs()]


def test_missing_tab_is_not_enabled():
    settings = AppSettings(tab_configs=[TabConfig(Tab.TIMER, True)])
    assert settings.is_tab_enabled(Tab.GRAPH) is False
    assert settings.tab_config(Tab.GRAPH) is None


def test_preset_colors_from_source():
    assert PresetTheme.DARK.colors().background == (18, 18, 18, 255)
    assert PresetTheme.SUNSET.colors().accent == (255, 165, 0, 255)
    assert PresetTheme.CUSTOM.colors() == ColorTheme()
    assert PresetTheme.DEFAULT.colors() == ColorTheme()


def test_current_colors_custom_vs_preset():
    custom = ColorTheme(accent=(1, 2, 3, 4))
    settings = AppSettings(theme_preset=PresetTheme.OCEAN, custom_colors=custom)
    assert settings.current_colors() == PresetTheme.OCEAN.colors()
    settings.theme_preset = PresetTheme.CUSTOM
    assert settings.current_colors() == custom


def test_display_name_and_reset():
    settings = AppSettings()
    config = settings.tab_config(Tab.STATS)
    assert config.default_name() == "Statistics"
    config.custom_name = "My Stats"
    assert config.display_name() == "My Stats"
    settings.reset_tab_name(Tab.STATS)
    assert config.display_name() == "Statistics"


def test_move_tab_up_and_down():
    settings = AppSettings()
    before = [c.tab_type for c in settings.tab_configs]
    settings.move_tab_up(1)
    after = [c.tab_type for c in settings.tab_configs]
    assert after[0] == before[1] and after[1] == before[0]
    settings.move_tab_down(0)
    assert [c.tab_type for c in settings.tab_configs] == before


def test_move_out_of_range_does_nothing():
    settings = AppSettings()
    before = [c.tab_type for c in settings.tab_configs]
    settings.move_tab_up(0)
    settings.move_tab_up(len(before))
    settings.move_tab_down(len(before) - 1)
    settings.move_tab_down(-1)
    assert [c.tab_type for c in settings.tab_configs] == before


def test_reset_tab_order_restores_order_and_drops_flashcards():
    settings = AppSettings()
    settings.tab_configs.reverse()
    settings.tab_config(Tab.GRAPH).enabled = False
    settings.reset_tab_order()
    kinds = [c.tab_type for c in settings.tab_configs]
    assert kinds[0] is Tab.TIMER
    assert kinds[-1] is Tab.SETTINGS
    assert Tab.FLASHCARDS not in kinds
    assert settings.tab_config(Tab.GRAPH).enabled is False


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    settings = AppSettings(
        navigation_layout=NavigationLayout.VERTICAL,
        theme_preset=PresetTheme.CUSTOM,
        custom_colors=ColorTheme(background=(10, 20, 30, 40)),
    )
    settings.tab_config(Tab.TODO).custom_name = "Tasks"
    settings.save(path)
    assert AppSettings.load(path) == settings


def test_to_dict_format():
    data = AppSettings().to_dict()
    assert data["navigation_layout"] == "Horizontal"
    assert data["theme_preset"] == "Default"
    assert data["custom_colors"]["accent"] == [69, 74, 108, 255]
    assert data["tab_configs"][0] == {"tab_type": "Timer", "enabled": True, "custom_name": None}


def test_load_missing_file_gives_defaults(tmp_path):
    assert AppSettings.load(tmp_path / "absent.json") == AppSettings()


def test_load_adds_missing_tabs(tmp_path):
    data = AppSettings().to_dict()
    data["tab_configs"] = [c for c in data["tab_configs"] if c["tab_type"] != "Flashcards"]
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    loaded = AppSettings.load(path)
    assert loaded.tab_configs[-1] == TabConfig(Tab.FLASHCARDS, True)
    assert len(loaded.tab_configs) == len(Tab)


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        AppSettings.load(path)


def test_from_dict_rejects_bad_data():
    data = AppSettings().to_dict()
    del data["theme_preset"]
    with pytest.raises(ValueError):
        AppSettings.from_dict(data)
    data = AppSettings().to_dict()
    data["custom_colors"]["accent"] = [1, 2, 300, 4]
    with pytest.raises(ValueError):
        AppSettings.from_dict(data)


def test_color_theme_round_trip():
    theme = PresetTheme.PURPLE.colors()
    assert ColorTheme.from_dict(theme.to_dict()) == theme