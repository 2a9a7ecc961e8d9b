"""A named group of save-game fields."""

from __future__ import annotations

import logging
from typing import Any

from .fields import FloatSaveField, IntSaveField, StringSaveField

_log = logging.getLogger(__name__)


class SaveArray:
    """A named collection of integer, float and string fields.

    Field names are unique within each kind; adding an existing name
    overwrites its value.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._ints: dict[str, IntSaveField] = {}
        self._floats: dict[str, FloatSaveField] = {}
        self._strings: dict[str, StringSaveField] = {}

    def __repr__(self) -> str:
        return f"SaveArray({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SaveArray):
            return NotImplemented
        return (
            self.name == other.name
            and self._ints == other._ints
            and self._floats == other._floats
            and self._strings == other._strings
        )

    def add_any(self, name: str, value: Any) -> None:
        """Add a field whose kind follows the type of ``value``.

        Raises ValueError when ``value`` is not an int, float or str.
        """
        if isinstance(value, bool):
            raise ValueError(f'Failed to add field with name "{name}". Invalid type.')
        if isinstance(value, int):
            self.add_int_field(name, value)
        elif isinstance(value, float):
            self.add_float_field(name, value)
        elif isinstance(value, str):
            self.add_string_field(name, value)
        else:
            raise ValueError(f'Failed to add field with name "{name}". Invalid type.')

    def add_int_field(self, name: str, value: int) -> None:
        """Add an integer field, overwriting the value if the name exists."""
        existing = self._ints.get(name)
        if existing is not None:
            _log.warning('field "%s" already exists, overwriting its value', name)
            existing.value = value
            return
        self._ints[name] = IntSaveField(name, value)

    def add_float_field(self, name: str, value: float) -> None:
        """Add a float field, overwriting the value if the name exists."""
        existing = self._floats.get(name)
        if existing is not None:
            _log.warning('field "%s" already exists, overwriting its value', name)
            existing.value = value
            return
        self._floats[name] = FloatSaveField(name, value)

    def add_string_field(self, name: str, value: str) -> None:
        """Add a string field, overwriting the value if the name exists."""
        existing = self._strings.get(name)
        if existing is not None:
            _log.warning('field "%s" already exists, overwriting its value', name)
            existing.value = value
            return
        self._strings[name] = StringSaveField(name, value)

    def get_int_field(self, name: str) -> IntSaveField:
        """Return the integer field ``name``; raises KeyError if absent."""
        try:
            return self._ints[name]
        except KeyError:
            raise KeyError(f"Failed to get field {name}") from None

    def get_float_field(self, name: str) -> FloatSaveField:
        """Return the float field ``name``; raises KeyError if absent."""
        try:
            return self._floats[name]
        except KeyError:
            raise KeyError(f"Failed to get field {name}") from None

    def get_string_field(self, name: str) -> StringSaveField:
        """Return the string field ``name``; raises KeyError if absent."""
        try:
            return self._strings[name]
        except KeyError:
            raise KeyError(f"Failed to get field {name}") from None

    def int_fields(self) -> tuple[IntSaveField, ...]:
        """Return the integer fields in insertion order."""
        return tuple(self._ints.values())

    def float_fields(self) -> tuple[FloatSaveField, ...]:
        """Return the float fields in insertion order."""
        return tuple(self._floats.values())

    def string_fields(self) -> tuple[StringSaveField, ...]:
        """Return the string fields in insertion order."""
        return tuple(self._strings.values())