import pytest

import awards_api.settings as project_settings
from voting import flags
from voting.models import Setting
from voting.settings_store import (
    DatabaseSettingsStore,
    InMemorySettingsStore,
    RESULTS_PUBLISHED,
    VOTING_OPEN,
    get_settings_store,
    parse_bool,
)


class TestParseBool:
    @pytest.mark.parametrize('raw', ['true', 'TRUE', ' True ', '1', 'yes', 'Yes'])
    def test_true_values(self, raw):
        assert parse_bool(raw, False) is True

    @pytest.mark.parametrize('raw', ['false', 'FALSE', '0', 'no', ' No'])
    def test_false_values(self, raw):
        assert parse_bool(raw, True) is False

    @pytest.mark.parametrize('raw', ['maybe', '', '2', 'on'])
    def test_unparseable_falls_back_to_default(self, raw):
        assert parse_bool(raw, True) is True
        assert parse_bool(raw, False) is False

    def test_missing_value_uses_default(self):
        assert parse_bool(None, True) is True
        assert parse_bool(None, False) is False


class TestInMemorySettingsStore:
    def test_defaults_when_empty(self):
        store = InMemorySettingsStore()
        assert store.snapshot() == {VOTING_OPEN: True, RESULTS_PUBLISHED: False}

    def test_initial_values(self):
        store = InMemorySettingsStore({VOTING_OPEN: False, RESULTS_PUBLISHED: 'yes'})
        assert store.get(VOTING_OPEN, True) is False
        assert store.get(RESULTS_PUBLISHED, False) is True

    def test_set_then_get(self):
        store = InMemorySettingsStore()
        store.set(RESULTS_PUBLISHED, True)
        assert store.get(RESULTS_PUBLISHED, False) is True


@pytest.mark.django_db
class TestDatabaseSettingsStore:
    def test_absent_key_returns_default(self):
        store = DatabaseSettingsStore()
        assert store.get(VOTING_OPEN, True) is True
        assert store.get(RESULTS_PUBLISHED, False) is False

    def test_set_stores_normalized_string(self):
        store = DatabaseSettingsStore()
        store.set(VOTING_OPEN, False)
        assert Setting.objects.get(key=VOTING_OPEN).value == 'false'

        store.set(VOTING_OPEN, 1)
        assert Setting.objects.get(key=VOTING_OPEN).value == 'true'

    def test_set_is_an_upsert(self):
        store = DatabaseSettingsStore()
        store.set(RESULTS_PUBLISHED, True)
        store.set(RESULTS_PUBLISHED, True)
        store.set(RESULTS_PUBLISHED, False)

        assert Setting.objects.filter(key=RESULTS_PUBLISHED).count() == 1
        assert store.get(RESULTS_PUBLISHED, True) is False

    def test_unparseable_stored_value(self):
        Setting.objects.create(key=VOTING_OPEN, value='garbage')
        assert DatabaseSettingsStore().get(VOTING_OPEN, True) is True

    def test_snapshot(self):
        Setting.objects.create(key=VOTING_OPEN, value='No')
        assert DatabaseSettingsStore().snapshot() == {VOTING_OPEN: False, RESULTS_PUBLISHED: False}


def test_get_settings_store_uses_configured_class(settings):
    settings.VOTING_SETTINGS_STORE = 'voting.settings_store.InMemorySettingsStore'
    assert isinstance(get_settings_store(), InMemorySettingsStore)


class TestProjectSettingsParsing:
    def test_project_settings_share_the_flag_parser(self):
        assert project_settings.parse_bool is flags.parse_bool

    def test_unknown_env_word_keeps_default(self):
        assert flags.parse_bool('enabled', False) is False
        assert flags.parse_bool('enabled', True) is True
