# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed, consumption-tracked access to the settings block of a test case.

Every typed read marks its key as consumed.  Once all recognized settings
have been read, :meth:`SettingsStore.ensure_all_read` rejects any remaining
key so that misspelled or unsupported settings do not go unnoticed.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from casefile.errors import FormatError

# ###############
# Public Interface
# ###############


class SettingsStore:
    """Read-only view over raw settings that records which keys were consumed."""

    def __init__(self, settings: Mapping[str, str]) -> None:
        self._settings: dict[str, str] = dict(settings)
        self._consumed: set[str] = set()

    @property
    def settings(self) -> dict[str, str]:
        """Return a copy of the raw settings, including consumed keys."""
        return dict(self._settings)

    @property
    def unread_keys(self) -> list[str]:
        """Return the keys not yet consumed by a typed read, sorted."""
        return sorted(self._settings.keys() - self._consumed)

    def __contains__(self, key: object) -> bool:
        return key in self._settings

    def get_bool(self, key: str, default: bool) -> bool:
        """Return the boolean setting *key*, or *default* if it is absent.

        Raises:
            FormatError: If the value is neither ``true`` nor ``false``.
        """
        value = self._consume(key)
        if value is None:
            return default
        if value == "true":
            return True
        if value == "false":
            return False
        raise FormatError(f"Invalid Boolean value: {value}.")

    def get_size(self, key: str, default: int) -> int:
        """Return the non-negative integer setting *key*, or *default* if it is absent.

        Raises:
            FormatError: If the value is not a base-10 non-negative integer.
        """
        value = self._consume(key)
        if value is None:
            return default
        if not _DIGITS.fullmatch(value):
            raise FormatError(f"Invalid integer value: {value}.")
        return int(value)

    def get_string(self, key: str, default: str) -> str:
        """Return the setting *key* verbatim, or *default* if it is absent."""
        value = self._consume(key)
        if value is None:
            return default
        return value

    def ensure_all_read(self) -> None:
        """Raise if any setting was never consumed by a typed read.

        Raises:
            FormatError: Listing all unread keys in sorted order.
        """
        unread = self.unread_keys
        if unread:
            raise FormatError("Unknown setting(s): " + ", ".join(unread))

    def _consume(self, key: str) -> str | None:
        """Mark *key* as read and return its raw value, or None if it is absent."""
        if key not in self._settings:
            return None
        self._consumed.add(key)
        return self._settings[key]


# ################
# Implementation
# ################

_DIGITS = re.compile(r"[0-9]+")

