"""
Settings store for the global voting flags.

This module provides:
- Reading and writing boolean-encoded setting values
- A database-backed store (default) on top of the Setting model
- An in-memory store for tests and scripted setups
- get_settings_store() to resolve the configured implementation
"""
import logging

from django.conf import settings
from django.utils.module_loading import import_string

from .flags import parse_bool, serialize_bool
from .models import Setting

logger = logging.getLogger(__name__)

VOTING_OPEN = 'voting_open'
RESULTS_PUBLISHED = 'results_published'

# Canonical defaults used whenever a flag has never been written
DEFAULTS = {
    VOTING_OPEN: True,
    RESULTS_PUBLISHED: False,
}


class BaseSettingsStore:
    """
    Interface shared by all settings stores.
    Subclasses implement _read() and _write().
    """

    def _read(self, key):
        raise NotImplementedError

    def _write(self, key, value):
        raise NotImplementedError

    def get(self, key, default=False) -> bool:
        return parse_bool(self._read(key), default)

    def set(self, key, value: bool):
        self._write(key, serialize_bool(value))

    def snapshot(self):
        """Current value of every known flag, with defaults applied."""
        return {key: self.get(key, default) for key, default in DEFAULTS.items()}


class DatabaseSettingsStore(BaseSettingsStore):
    """Settings persisted in the `settings` table."""

    def _read(self, key):
        return Setting.objects.filter(key=key).values_list('value', flat=True).first()

    def _write(self, key, value):
        Setting.objects.update_or_create(key=key, defaults={'value': value})
        logger.info(f"Setting updated - {key}: {value}")


class InMemorySettingsStore(BaseSettingsStore):
    """
    Settings kept in a plain dict.
    Values may be given as booleans or as raw strings.
    """

    def __init__(self, initial=None):
        self._values = {}
        for key, value in (initial or {}).items():
            self._values[key] = serialize_bool(value) if isinstance(value, bool) else value

    def _read(self, key):
        return self._values.get(key)

    def _write(self, key, value):
        self._values[key] = value


def get_settings_store():
    """Instantiate the store class named by settings.VOTING_SETTINGS_STORE."""
    store_class = import_string(settings.VOTING_SETTINGS_STORE)
    return store_class()
