"""A save game kept as a JSON file of named fields and arrays."""

from __future__ import annotations

import copy
import json
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable

from .array import SaveArray
from .fields import FloatSaveField, IntSaveField, StringSaveField


def _elements(node: Any) -> Iterable[Any]:
    """Iterate a JSON node the way a JSON container is walked."""
    if node is None:
        return ()
    if isinstance(node, dict):
        return node.values()
    if isinstance(node, list):
        return node
    return (node,)


def _text(node: Any, what: str) -> str:
    if not isinstance(node, str):
        raise TypeError(f"{what} must be a string, got {type(node).__name__}")
    return node


def _entry(field: Any) -> dict[str, Any]:
    return {"name": field.name, "value": field.value}


class SaveGame:
    """Fields and arrays saved to a JSON file.

    If the file exists when the save game is created, its content is loaded.
    """

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self.path = Path(file_name)
        self._ints: dict[str, IntSaveField] = {}
        self._floats: dict[str, FloatSaveField] = {}
        self._strings: dict[str, StringSaveField] = {}
        self._arrays: list[SaveArray] = []
        self._load()

    def _load(self) -> None:
        try:
            stream = self.path.open(encoding="utf-8")
        except OSError:
            return
        with stream:
            document = json.load(stream)

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ValueError("Failed to load save game: top level is not an object")

        for field in _elements(document.get("fields")):
            if not (isinstance(field, dict) and "name" in field and "value" in field):
                raise ValueError(
                    'Failed to load field from JSON: field does not contain "name" and "value"'
                )
            self.add_any(_text(field["name"], "field name"), field["value"])

        for array in _elements(document.get("arrays")):
            if not (isinstance(array, dict) and "name" in array):
                raise ValueError(
                    'Failed to load array from JSON: array does not contain "name" and "fields"'
                )
            save_array = SaveArray(_text(array["name"], "array name"))
            for array_field in _elements(array.get("fields")):
                if isinstance(array_field, dict) and "name" in array_field and "value" in array_field:
                    save_array.add_any(_text(array_field["name"], "field name"), array_field["value"])
            self._arrays.append(save_array)

    def store(self) -> None:
        """Write all fields and arrays to the file as indented JSON."""
        document: dict[str, Any] = {}

        fields = [
            _entry(field)
            for field in (*self._ints.values(), *self._floats.values(), *self._strings.values())
        ]
        if fields:
            document["fields"] = fields

        arrays = []
        for array in self._arrays:
            array_json: dict[str, Any] = {"name": array.name}
            array_fields = [
                _entry(field)
                for field in (*array.int_fields(), *array.float_fields(), *array.string_fields())
            ]
            if array_fields:
                array_json["fields"] = array_fields
            arrays.append(array_json)
        if arrays:
            document["arrays"] = arrays

        text = json.dumps(document or None, indent=4, sort_keys=True, ensure_ascii=False)
        self.path.write_text(text, encoding="utf-8")

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
        if self.has_int_field(name):
            self.set_int_field(name, value)
            return
        self._ints[name] = IntSaveField(name, value)

    def add_float_field(self, name: str, value: float) -> None:
        """Add a float field, overwriting the value if the name exists."""
        if self.has_float_field(name):
            self.set_float_field(name, value)
            return
        self._floats[name] = FloatSaveField(name, value)

    def add_string_field(self, name: str, value: str) -> None:
        """Add a string field, overwriting the value if the name exists."""
        if self.has_string_field(name):
            self.set_string_field(name, value)
            return
        self._strings[name] = StringSaveField(name, value)

    def set_int_field(self, name: str, value: int) -> None:
        """Change an existing integer field; raises KeyError if absent."""
        if name not in self._ints:
            raise KeyError(f'Failed to find field with name "{name}"')
        self._ints[name].value = value

    def set_float_field(self, name: str, value: float) -> None:
        """Change an existing float field; raises KeyError if absent."""
        if name not in self._floats:
            raise KeyError(f'Failed to find field with name "{name}"')
        self._floats[name].value = value

    def set_string_field(self, name: str, value: str) -> None:
        """Change an existing string field; raises KeyError if absent."""
        if name not in self._strings:
            raise KeyError(f'Failed to find field with name "{name}"')
        self._strings[name].value = value

    def has_int_field(self, name: str) -> bool:
        return name in self._ints

    def has_float_field(self, name: str) -> bool:
        return name in self._floats

    def has_string_field(self, name: str) -> bool:
        return name in self._strings

    def remove(self) -> None:
        """Delete the save file; raises OSError if that fails."""
        os.remove(self.path)

    def get_int_field(self, name: str) -> IntSaveField:
        """Return a copy of the integer field ``name``; raises KeyError if absent."""
        if name not in self._ints:
            raise KeyError(f'Failed to get field with name "{name}"')
        return replace(self._ints[name])

    def get_float_field(self, name: str) -> FloatSaveField:
        """Return a copy of the float field ``name``; raises KeyError if absent."""
        if name not in self._floats:
            raise KeyError(f'Failed to get field with name "{name}"')
        return replace(self._floats[name])

    def get_string_field(self, name: str) -> StringSaveField:
        """Return a copy of the string field ``name``; raises KeyError if absent."""
        if name not in self._strings:
            raise KeyError(f'Failed to get field with name "{name}"')
        return replace(self._strings[name])

    def _find_array(self, name: str) -> int | None:
        return next(
            (index for index, array in enumerate(self._arrays) if array.name == name),
            None,
        )

    def add_array(self, name: str) -> None:
        """Add an empty array; raises ValueError if the name is taken."""
        if self._find_array(name) is not None:
            raise ValueError(f'Failed to add array with name "{name}". Array already exists.')
        self._arrays.append(SaveArray(name))

    def set_array(self, name: str, value: SaveArray) -> None:
        """Replace the array ``name`` with a copy of ``value``; raises KeyError if absent."""
        index = self._find_array(name)
        if index is None:
            raise KeyError(f'Failed to set array with name "{name}". Array does not exist.')
        self._arrays[index] = copy.deepcopy(value)

    def get_array(self, name: str) -> SaveArray:
        """Return a copy of the array ``name``; raises KeyError if absent."""
        index = self._find_array(name)
        if index is None:
            raise KeyError(f'Failed to get array with name "{name}"')
        return copy.deepcopy(self._arrays[index])