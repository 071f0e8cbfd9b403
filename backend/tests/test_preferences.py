import json

from expense_dashboard.client.preferences import (
    NotificationPreferences,
    PreferencesStore,
    UserSettings,
)


def test_missing_file_gives_defaults(tmp_path) -> None:
    store = PreferencesStore(tmp_path / "prefs.json")

    loaded = store.load_settings()

    assert loaded == UserSettings()
    assert loaded.currency == "USD"
    assert loaded.notifications.sms is False
    assert store.theme() is None


def test_settings_round_trip_uses_camel_case_keys(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    store = PreferencesStore(path)
    wanted = UserSettings(
        theme="dark",
        currency="EUR",
        date_format="DD/MM/YYYY",
        notifications=NotificationPreferences(weekly_summary=False),
    )

    store.save_settings(wanted)
    raw = json.loads(path.read_text(encoding="utf-8"))

    assert raw["userSettings"]["dateFormat"] == "DD/MM/YYYY"
    assert raw["userSettings"]["notifications"]["weeklySummary"] is False
    assert store.load_settings() == wanted


def test_unreadable_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json", encoding="utf-8")

    assert PreferencesStore(path).load_settings() == UserSettings()


def test_invalid_settings_entry_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"userSettings": {"showRecentTransactions": "maybe"}}), encoding="utf-8")

    assert PreferencesStore(path).load_settings() == UserSettings()


def test_theme_and_settings_are_kept_side_by_side(tmp_path) -> None:
    store = PreferencesStore(tmp_path / "nested" / "prefs.json")

    store.apply_theme("dark")
    store.save_settings(UserSettings(currency="GBP"))

    assert store.theme() == "dark"
    assert store.load_settings().currency == "GBP"
