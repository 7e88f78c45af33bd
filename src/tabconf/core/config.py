# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/config.py
# DESCRIPTION:    Compound configuration options
# CREATED:        19.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Contributor(s): Pavel Císař (original code, firebird-base)
#                 ______________________________________

"""tabconf-core - Compound configuration options

A compound option holds a list of named records (rows), where each record has the
same fixed set of independently typed fields. The set of fields (the option schema)
is declared once, as a list of `CompoundEntry` descriptors. Values are always
stored as text, so the option can be written to and read from flat configuration
files, while callers read and write them as typed tuples::

    (name, value_1, ..., value_n)

Typed access converts the stored text with the `.strconv` convertors, so there is
no per-type parsing code in the option itself. Stored text is validated against
the schema whenever it enters the option, so typed reads can only fail when the
caller asks for types that don't match the schema. Such a mismatch is a
programming error and is reported with `.ContractError`.

This module provides:

*   `CompoundEntry` and `EntryList` - the option schema.
*   `Option` - abstract base of configuration options with string (de)serialization,
    defaults, change notification and `configparser`/protobuf support.
*   `CompoundOption` - the option with typed and untyped access to its rows.
*   `Config` - collection of options and nested configs, mapped to `configparser`
    sections and `google.protobuf.Struct` messages.

Example::

    from configparser import ConfigParser
    from tabconf.core.config import CompoundEntry, CompoundOption, Config

    class InputConfig(Config):
        '''Input settings.'''
        def __init__(self):
            super().__init__('input')
            self.bindings = CompoundOption('bindings',
                                           [CompoundEntry(int, 'key_'),
                                            CompoundEntry(float, 'repeat_')],
                                           'Key bindings with repeat rate')

    cfg = InputConfig()
    parser = ConfigParser()
    parser.read_string('''
    [input]
    bindings =
        copy, 11, 2.5
        paste, 12, 3.5
    ''')
    cfg.load_config(parser)

    cfg.bindings.get_value(int, float)   # [('copy', 11, 2.5), ('paste', 12, 3.5)]
    cfg.bindings.get_value_simple()      # [(11, 2.5), (12, 3.5)]
"""

from __future__ import annotations

import csv
import io
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from configparser import DEFAULTSECT, ConfigParser
from copy import copy
from operator import attrgetter
from typing import Any, Generic, TypeAlias, TypeVar

from google.protobuf.struct_pb2 import Struct

from .collections import DataList
from .logging import get_logger
from .signal import signal
from .strconv import convert_from_str, convert_to_str, is_convertible, resolve_type
from .types import ContractError, Error, TypeHint

T = TypeVar("T")

#: Untyped option value: list of rows, each row is `[name, value_1, ..., value_n]`.
Rows: TypeAlias = list[list[str]]

#: Characters that require quoting of a cell in string form of compound value.
_QUOTED_CHARS = (',', '"', '\n', '\r')
#: Characters that require quoting when they start a cell (configparser comments).
_QUOTED_LEADERS = ('#', ';')

def quote_cell(value: str) -> str:
    """Returns cell value as it's written in string form of compound value.

    Values that are empty, have leading or trailing whitespace, or contain a comma,
    a double quote or a line break are enclosed in double quotes (with inner double
    quotes doubled). Values starting with a comment character are quoted as well.
    """
    if (not value or value != value.strip() or value.startswith(_QUOTED_LEADERS)
        or any(c in value for c in _QUOTED_CHARS)):
        return '"{}"'.format(value.replace('"', '""'))
    return value

def format_rows(rows: Rows) -> str:
    """Returns string form of untyped compound value: one row per line, cells
    separated by comma and space.
    """
    return '\n'.join(', '.join(quote_cell(cell) for cell in row) for row in rows)

def parse_rows(value: str) -> Rows:
    """Splits string form of compound value into rows of cells.

    Blank lines are ignored. No schema validation is performed.

    Raises:
        ValueError: When the string is not a valid CSV text.
    """
    try:
        return [row for row in csv.reader(io.StringIO(value, newline=''), skipinitialspace=True)
                if row and row != ['']]
    except csv.Error as exc:
        raise ValueError(f"Malformed compound value: {exc}") from exc

def _copy_rows(rows: Rows) -> Rows:
    return [list(row) for row in rows]

# Schema

class CompoundEntry(Generic[T]):
    """Declaration of one field (column) of compound option rows.

    Arguments:
        datatype: Field data type, or name of a type registered in `.strconv`.
        prefix:   Prefix used to group values of this field in configuration files.
        name:     Human-readable field name.

    Raises:
        TypeError: When there is no `.strconv` convertor for `datatype`.

    Important:
        Instances are immutable.
    """
    def __init__(self, datatype: type[T] | str, prefix: str, name: str=''):
        self.__datatype: type[T] = resolve_type(datatype)
        self.__prefix: str = prefix
        self.__name: str = name
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__datatype.__name__}, {self.__prefix!r}, {self.__name!r})"
    def get_prefix(self) -> str:
        """Returns the field prefix.
        """
        return self.__prefix
    def get_name(self) -> str:
        """Returns the field name.
        """
        return self.__name
    def is_parsable(self, value: str) -> bool:
        """Returns True if `value` is a valid string representation of field data type.
        """
        return is_convertible(self.__datatype, value)
    def clone(self) -> CompoundEntry[T]:
        """Returns a new entry with the same data type, prefix and name.
        """
        return self.__class__(self.__datatype, self.__prefix, self.__name)
    #: Field data type.
    datatype: type[T] = property(attrgetter('_CompoundEntry__datatype'), doc="Field data type")
    #: Field prefix.
    prefix: str = property(get_prefix, doc="Field prefix")
    #: Field name.
    name: str = property(get_name, doc="Field name")

class EntryList(DataList):
    """Frozen list of `CompoundEntry` instances that defines compound option schema.

    Entries could be looked up by prefix with `get()`.

    Arguments:
        entries: Field declarations, in column order.

    Raises:
        TypeError: When any item is not a `CompoundEntry`.
    """
    def __init__(self, entries: Iterable[CompoundEntry]=()):
        super().__init__(entries, CompoundEntry, attrgetter('prefix'), frozen=True)
    def clone(self) -> EntryList:
        """Returns new list with clones of all entries.
        """
        return EntryList(entry.clone() for entry in self)
    @property
    def types(self) -> tuple[type, ...]:
        """Data types of all fields, in column order.
        """
        return tuple(entry.datatype for entry in self)

# Options

class Option(Generic[T], ABC):
    """Generic abstract base class for configuration options.

    Values are exchanged with configuration files as strings. Methods `set_as_str`
    and `set_default_as_str` raise `ValueError` on invalid input, while
    `set_value_str` and `set_default_value_str` report it by return value and
    never change the option in such a case.

    Every successful change of the option value emits the `updated` signal.

    Arguments:
        name: Option name.
        datatype: Option datatype.
        description: Option description. Can span multiple lines.
        required: True if option must have a value.
    """
    def __init__(self, name: str, datatype: type[T], description: str, *, required: bool=False):
        assert name and isinstance(name, str), "name required" # noqa: S101
        assert datatype and isinstance(datatype, type), "datatype required" # noqa: S101
        assert description and isinstance(description, str), "description required" # noqa: S101
        #: Option name.
        self.name: str = name
        #: Option datatype.
        self.datatype: type[T] = datatype
        #: Option description. Can span multiple lines.
        self.description: str = description
        #: True if option must have a value.
        self.required: bool = required
    @signal
    def updated(self) -> None:
        """Emitted after every successful change of option value.
        """
    @property
    def _agent_name_(self) -> str:
        return f'option.{self.name}'
    def _get_value_description(self) -> str:
        return f'{self.datatype.__name__}\n'
    def _get_config_lines(self, *, plain: bool=False) -> list[str]:
        """Returns list of text lines with option value (and description) for
        configuration file processed with `~configparser.ConfigParser`.

        The value is commented out when it equals the default value.
        """
        lines = []
        if not plain:
            if self.required:
                lines.append("; REQUIRED option.\n")
            for line in self.description.strip().splitlines():
                lines.append(f"; {line}\n")
            first = True
            for line in self._get_value_description().splitlines():
                lines.append(f"; {'Type: ' if first else ''}{line}\n")
                first = False
        nodef = ';' if self.get_as_str() == self.get_default_as_str() else ''
        value = self.get_formatted()
        if '\n' in value:
            chunks = value.splitlines(keepends=True)
            value = ''.join([chunks[0], *(f'{nodef}{x}' for x in chunks[1:])])
        lines.append(f'{nodef}{self.name} = {value}\n')
        return lines
    def notify_updated(self) -> None:
        """Emits the `updated` signal.
        """
        self.updated.emit()
    def load_config(self, config: ConfigParser, section: str) -> None:
        """Update option value from `~configparser.ConfigParser` instance.

        Arguments:
            config:  ConfigParser instance.
            section: Name of ConfigParser section with the option.

        Raises:
            ValueError: When option value cannot be loaded.
            KeyError: If section does not exist, and it's not `configparser.DEFAULTSECT`.
        """
        if not config.has_section(section) and section != DEFAULTSECT:
            raise KeyError(f"Configuration error: section '{section}' not found!")
        if config.has_option(section, self.name):
            self.set_as_str(config[section][self.name])
    def validate(self) -> None:
        """Validates option state.

        Raises:
            Error: When required option does not have a value.
        """
        if self.required and not self.has_value():
            raise Error(f"Missing value for required option '{self.name}'")
    def get_config(self, *, plain: bool=False) -> str:
        """Returns string with option definition for configuration file processed
        with `~configparser.ConfigParser`.

        Arguments:
          plain: When True, it outputs only the option value. When False, it includes
                 also option description and other helpful information.
        """
        return ''.join(self._get_config_lines(plain=plain))
    def set_value_str(self, value: str) -> bool:
        """Set new option value from string.

        Returns:
            True on success. When `value` is not valid, returns False and the option
            value is not changed.
        """
        try:
            self.set_as_str(value)
        except ValueError as exc:
            get_logger(self).debug("Value rejected: %s", exc)
            return False
        return True
    def get_value_str(self) -> str:
        """Returns option value as string.
        """
        return self.get_as_str()
    def set_default_value_str(self, value: str) -> bool:
        """Set new default option value from string.

        Returns:
            True on success. When `value` is not valid, returns False and the default
            value is not changed.
        """
        try:
            self.set_default_as_str(value)
        except ValueError as exc:
            get_logger(self).debug("Default value rejected: %s", exc)
            return False
        return True
    def get_default_value_str(self) -> str:
        """Returns default option value as string.
        """
        return self.get_default_as_str()
    @abstractmethod
    def has_value(self) -> bool:
        """Returns True if option has a value.
        """
    @abstractmethod
    def clone_option(self) -> Option[T]:
        """Returns independent copy of the option, with the same value and default
        value. Slots connected to `updated` are not copied.
        """
    @abstractmethod
    def reset_to_default(self) -> None:
        """Sets the option value to the default value.
        """
    @abstractmethod
    def clear(self, *, to_default: bool=True) -> None:
        """Clears the option value.

        Arguments:
            to_default: If True, sets the option value to default value, else to empty value.
        """
    @abstractmethod
    def get_formatted(self) -> str:
        """Returns value formatted for use in config file.
        """
    @abstractmethod
    def set_as_str(self, value: str) -> None:
        """Set new option value from string.

        Raises:
            ValueError: When the argument is not a valid option value.
        """
    @abstractmethod
    def get_as_str(self) -> str:
        """Returns value as string.
        """
    @abstractmethod
    def set_default_as_str(self, value: str) -> None:
        """Set new default option value from string.

        Raises:
            ValueError: When the argument is not a valid option value.
        """
    @abstractmethod
    def get_default_as_str(self) -> str:
        """Returns default value as string.
        """
    @abstractmethod
    def load_proto(self, proto: Struct) -> None:
        """Deserialize value from `google.protobuf.Struct` message.

        Arguments:
            proto: Message that may contain the option value under `self.name` key.

        Raises:
            TypeError: When the stored value has wrong kind.
            ValueError: When the stored value is not valid.
        """
    @abstractmethod
    def save_proto(self, proto: Struct) -> None:
        """Serialize value into `google.protobuf.Struct` message under `self.name` key.
        """

class CompoundOption(Option[list]):
    """Configuration option with a list of named tuples.

    The value is stored as rows of strings `[name, value_1, ..., value_n]`, where
    `value_k` is text representation of a value of type declared by `entries[k-1]`.
    Every row has exactly `len(entries) + 1` items, and all stored values are valid
    for their field type.

    The prefixes of entries are used by configuration formats that store each field
    as a separate key. For example, with entries `(int, 'prefix1_')` and
    `(float, 'prefix2_')` the tuples `(key1, v11, v21)` and `(key2, v12, v22)` are
    stored as::

        prefix1_key1 = v11
        prefix2_key1 = v21
        prefix1_key2 = v12
        prefix2_key2 = v22

    Arguments:
        name:        Option name.
        entries:     Schema, field declarations in column order. An `EntryList` is
                     used as is, any other iterable is converted to `EntryList`.
        description: Option description. Can span multiple lines.
        type_hint:   How the rows should be presented: `plain`, `dict` or `tuple`.
                     It's a hint for config writers, and it's not validated.
        required:    True if option must have a value (at least one row).
        default:     Default option value, either as string or as untyped rows.

    Raises:
        ValueError: When default value is not valid.
    """
    def __init__(self, name: str, entries: Iterable[CompoundEntry], description: str, *,
                 type_hint: TypeHint | str=TypeHint.TUPLE, required: bool=False,
                 default: str | Sequence[Sequence[str]] | None=None):
        self._entries: EntryList = entries if isinstance(entries, EntryList) else EntryList(entries)
        self._type_hint: str = type_hint.value if isinstance(type_hint, TypeHint) else str(type_hint)
        self._value: Rows = []
        self._default: Rows = []
        super().__init__(name, list, description, required=required)
        if default is not None:
            if isinstance(default, str):
                self.set_default_as_str(default)
            else:
                self._default = self._validated(default)
            self._value = _copy_rows(self._default)
    def _get_value_description(self) -> str:
        types = ', '.join(entry.datatype.__name__ for entry in self._entries)
        prefixes = ', '.join(quote_cell(entry.prefix) for entry in self._entries)
        return f"compound ({self._type_hint}) [{types}]\nRow: name, {prefixes}\n"
    def _validated(self, value: Iterable[Sequence[str]]) -> Rows:
        """Returns copy of untyped rows, verified against the option schema.

        Raises:
            ValueError: When any row does not match the schema.
        """
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise ValueError(f"Value of option '{self.name}' is not a sequence of rows")
        width = len(self._entries) + 1
        result = []
        for i, row in enumerate(value):
            if isinstance(row, str) or not isinstance(row, Iterable):
                raise ValueError(f"Row {i} of option '{self.name}' is not a sequence")
            row = list(row) # noqa: PLW2901
            if len(row) != width:
                raise ValueError(f"Row {i} of option '{self.name}' has {len(row)} items, "
                                 f"{width} expected")
            if row == ['']:
                raise ValueError(f"Row {i} of option '{self.name}' has empty name and no values")
            if not all(isinstance(cell, str) for cell in row):
                raise ValueError(f"Row {i} of option '{self.name}' contains non-string items")
            for column, (entry, cell) in enumerate(zip(self._entries, row[1:]), start=1):
                if not entry.is_parsable(cell):
                    raise ValueError(f"Item {column} of row {i} of option '{self.name}' "
                                     f"is not a valid '{entry.datatype.__name__}' value: '{cell}'")
            result.append(row)
        return result
    def _set_rows(self, rows: Rows) -> None:
        self._value = rows
        self.notify_updated()
    def _check_types(self, types: tuple[type | str, ...]) -> tuple[type | str, ...]:
        if not types:
            return self._entries.types
        if len(types) != len(self._entries):
            raise ContractError(f"Option '{self.name}' has {len(self._entries)} fields, "
                                f"but {len(types)} types were given", option=self.name)
        return types
    def has_value(self) -> bool:
        """Returns True if option has at least one row.
        """
        return bool(self._value)
    def clone_option(self) -> CompoundOption:
        """Returns independent copy of the option.

        The copy has cloned schema and copies of the value and default value. Slots
        connected to `updated` are not copied.
        """
        result = copy(self)
        result._entries = self._entries.clone()
        result._value = _copy_rows(self._value)
        result._default = _copy_rows(self._default)
        return result
    def reset_to_default(self) -> None:
        """Sets the option value to copy of the default value.
        """
        get_logger(self).debug("Reset to default")
        self._set_rows(_copy_rows(self._default))
    def clear(self, *, to_default: bool=True) -> None:
        """Clears the option value.

        Arguments:
            to_default: If True, sets the option value to default value, else to empty list.
        """
        if to_default:
            self.reset_to_default()
        else:
            self._set_rows([])
    def get_formatted(self) -> str:
        """Returns value formatted for use in config file.

        Rows are written on separate lines indented with three spaces, the value
        starts on the line after the option name.
        """
        if not self._value:
            return ''
        x = '\n   '
        return x + x.join(format_rows(self._value).split('\n'))
    def set_as_str(self, value: str) -> None:
        """Set new option value from string.

        The string contains one row per line, with cells separated by comma. Cells
        could be enclosed in double quotes.

        Raises:
            ValueError: When the argument is not a valid option value.
        """
        self._set_rows(self._validated(parse_rows(value)))
    def get_as_str(self) -> str:
        """Returns value as string.
        """
        return format_rows(self._value)
    def set_default_as_str(self, value: str) -> None:
        """Set new default option value from string.

        Raises:
            ValueError: When the argument is not a valid option value.
        """
        self._default = self._validated(parse_rows(value))
        get_logger(self).debug("Default value set to %d rows", len(self._default))
    def get_default_as_str(self) -> str:
        """Returns default value as string.
        """
        return format_rows(self._default)
    def get_value_untyped(self) -> Rows:
        """Returns copy of stored rows.
        """
        return _copy_rows(self._value)
    def set_value_untyped(self, value: Iterable[Sequence[str]]) -> bool:
        """Replaces stored rows.

        Every row must have `len(entries) + 1` strings, and value strings must be
        valid for types of their fields.

        Returns:
            True on success. When `value` is not valid, returns False and the option
            value is not changed.
        """
        try:
            rows = self._validated(value)
        except ValueError as exc:
            get_logger(self).debug("Value rejected: %s", exc)
            return False
        self._set_rows(rows)
        return True
    def get_value(self, *types: type | str) -> list[tuple]:
        """Returns option value as list of tuples `(name, value_1, ..., value_n)`.

        Arguments:
            types: Data types (or their names) for fields, in column order. When
                   omitted, the data types declared by option entries are used.

        Raises:
            ContractError: When the number of `types` differs from number of entries,
                           or stored value could not be converted to requested type.
        """
        types = self._check_types(types)
        rows = self._value
        result = []
        for i, row in enumerate(rows):
            item = [row[0]]
            for column, cls in enumerate(types, start=1):
                try:
                    item.append(convert_from_str(cls, row[column]))
                except (ValueError, TypeError, ArithmeticError) as exc:
                    raise ContractError(f"Item {column} of row {i} of option '{self.name}' "
                                        f"could not be converted to "
                                        f"'{cls if isinstance(cls, str) else cls.__name__}'",
                                        option=self.name) from exc
            result.append(tuple(item))
        return result
    def get_value_simple(self, *types: type | str) -> list[tuple]:
        """Returns option value as list of tuples `(value_1, ..., value_n)`, i.e. without
        row names.

        Raises:
            ContractError: See `get_value()`.
        """
        return [item[1:] for item in self.get_value(*types)]
    def set_value(self, value: Iterable[Sequence[Any]]) -> None:
        """Set new option value from tuples `(name, value_1, ..., value_n)`.

        Values are converted to strings with `.strconv` convertors of their classes.

        Raises:
            ContractError: When any tuple does not have `len(entries) + 1` items, or
                           any value is not compatible with data type of its field.
                           The option value is not changed in such a case.
        """
        width = len(self._entries) + 1
        rows = []
        for i, item in enumerate(value):
            if isinstance(item, str) or not isinstance(item, Sequence):
                raise ContractError(f"Tuple {i} for option '{self.name}' is not a sequence",
                                    option=self.name)
            if len(item) != width:
                raise ContractError(f"Tuple {i} for option '{self.name}' has {len(item)} items, "
                                    f"{width} expected", option=self.name)
            row = []
            for column, (entry, cell) in enumerate(zip((None, *self._entries), item)):
                try:
                    text = convert_to_str(cell)
                except TypeError as exc:
                    raise ContractError(f"Item {column} of tuple {i} for option '{self.name}' "
                                        f"has unsupported type '{type(cell).__name__}'",
                                        option=self.name) from exc
                if entry is not None and not entry.is_parsable(text):
                    raise ContractError(f"Item {column} of tuple {i} for option '{self.name}' "
                                        f"is not compatible with '{entry.datatype.__name__}'",
                                        option=self.name)
                row.append(text)
            if row == ['']:
                raise ContractError(f"Tuple {i} for option '{self.name}' has empty name and no values",
                                    option=self.name)
            rows.append(row)
        self._set_rows(rows)
    def set_value_simple(self, value: Iterable[Sequence[Any]]) -> None:
        """Set new option value from tuples `(value_1, ..., value_n)`.

        Rows are named by their index ('0', '1', ...).

        Raises:
            ContractError: See `set_value()`.
        """
        rows = []
        for i, item in enumerate(value):
            if isinstance(item, str) or not isinstance(item, Sequence):
                raise ContractError(f"Tuple {i} for option '{self.name}' is not a sequence",
                                    option=self.name)
            rows.append((str(i), *item))
        self.set_value(rows)
    def get_entries(self) -> EntryList:
        """Returns option schema.
        """
        return self._entries
    def get_type_hint(self) -> str:
        """Returns type hint.
        """
        return self._type_hint
    def load_proto(self, proto: Struct) -> None:
        """Deserialize value from `google.protobuf.Struct` message.

        The value is expected as list of lists of strings.

        Raises:
            TypeError: When the stored value has wrong kind.
            ValueError: When the stored value is not valid.
        """
        if self.name in proto.fields:
            opt = proto.fields[self.name]
            if (kind := opt.WhichOneof('kind')) != 'list_value':
                raise TypeError(f"Wrong value type: {kind}")
            rows = []
            for row in opt.list_value.values:
                if (kind := row.WhichOneof('kind')) != 'list_value':
                    raise TypeError(f"Wrong row type: {kind}")
                cells = []
                for cell in row.list_value.values:
                    if (kind := cell.WhichOneof('kind')) != 'string_value':
                        raise TypeError(f"Wrong item type: {kind}")
                    cells.append(cell.string_value)
                rows.append(cells)
            self._set_rows(self._validated(rows))
    def save_proto(self, proto: Struct) -> None:
        """Serialize value into `google.protobuf.Struct` message as list of lists of strings.
        """
        opt = proto.fields[self.name]
        opt.Clear()
        opt.list_value.SetInParent()
        for row in self._value:
            opt.list_value.add_list().extend(row)
    #: Entries that define option schema.
    entries: EntryList = property(get_entries, doc="Option schema")
    #: Type hint.
    type_hint: str = property(get_type_hint, doc="Type hint")
    #: Default value (copy of untyped rows).
    default: Rows = property(lambda self: _copy_rows(self._default), doc="Default value")
    #: Current option value.
    value: list[tuple] = property(get_value, set_value, doc="Current option value")

class Config:
    """Collection of configuration options, potentially nested.

    Arguments:
        name: Name associated with Config (default section name).
        optional: Whether config is optional (True) or mandatory (False) for
                  configuration file (see `.load_config()` for details).
        description: Optional configuration description. Can span multiple lines.

    Important:
        Descendants must define individual options and sub configs as instance attributes.
    """
    def __init__(self, name: str, *, optional: bool=False, description: str | None=None):
        self._name: str = name
        self._optional: bool = optional
        self._description: str | None = description if description is not None else self.__doc__
    def __setattr__(self, name, value) -> None:
        for attr in vars(self).values():
            if isinstance(attr, Option) and attr.name == name:
                raise ValueError("Cannot assign values to option itself, use 'option.value' instead")
        super().__setattr__(name, value)
    def validate(self) -> None:
        """Recursively validates all options and sub-configs.

        Raises:
            Error: When required option does not have a value, or option is not
                   defined as attribute with the same name.
        """
        for option in self.options:
            option.validate()
            if not hasattr(self, option.name):
                raise Error(f"Option '{option.name}' is not defined as attribute with the same name")
        for config in self.configs:
            config.validate()
    def clear(self, *, to_default: bool=True) -> None:
        """Clears all options, including options in sub-configs.

        Arguments:
            to_default: If True, sets option values to defaults, else to empty values.
        """
        for option in self.options:
            option.clear(to_default=to_default)
        for config in self.configs:
            config.clear(to_default=to_default)
    def get_description(self) -> str:
        """Configuration description. Class doc string is used when description is
        not provided on instance creation.
        """
        return '' if self._description is None else self._description
    def get_config(self, *, plain: bool=False) -> str:
        """Returns string with configuration for file processed with
        `~configparser.ConfigParser`.

        Arguments:
          plain: When True, it outputs only the option values. When False, it includes
                 also option descriptions and other helpful information.
        """
        if self.optional and not self.name:
            return ''
        lines = [f"[{self.name}]\n"]
        if not plain:
            lines.append(';\n')
            for line in self.get_description().strip().splitlines():
                lines.append(f"; {line}\n")
        for option in self.options:
            if not plain:
                lines.append('\n')
            lines.append(option.get_config(plain=plain))
        for config in self.configs:
            if subcfg := config.get_config(plain=plain):
                lines.append('\n')
                lines.append(subcfg)
        return ''.join(lines)
    def load_config(self, config: ConfigParser, section: str | None=None) -> None:
        """Update configuration values from `~configparser.ConfigParser` instance.

        Arguments:
            config:  `ConfigParser` instance.
            section: Name of the section with option values. Config name is used
                     when not specified. Sub-configs use their names as section names.

        Raises:
            Error: When section does not exist and config is not optional, or when
                   any option value could not be loaded.
        """
        if section is None:
            section = self.name
        if not config.has_section(section):
            if self._optional:
                return
            if section != DEFAULTSECT:
                raise Error(f"Configuration error: section '{section}' not found!")
        try:
            for option in self.options:
                option.load_config(config, section)
            for subcfg in self.configs:
                subcfg.load_config(config)
        except Error:
            raise
        except Exception as exc:
            raise Error(f"Configuration error: {exc}") from exc
    def load_proto(self, proto: Struct) -> None:
        """Deserialize values from `google.protobuf.Struct` message. Sub-configs are
        read from nested messages stored under their names.
        """
        for option in self.options:
            option.load_proto(proto)
        for subcfg in self.configs:
            if subcfg.name in proto.fields:
                subcfg.load_proto(proto.fields[subcfg.name].struct_value)
    def save_proto(self, proto: Struct) -> None:
        """Serialize values into `google.protobuf.Struct` message. Sub-configs are
        stored as nested messages under their names.
        """
        for option in self.options:
            option.save_proto(proto)
        for subcfg in self.configs:
            subcfg.save_proto(proto.get_or_create_struct(subcfg.name))
    @property
    def name(self) -> str:
        """Name associated with Config (default section name).
        """
        return self._name
    @property
    def optional(self) -> bool:
        """Whether config is optional (True) or mandatory (False) for configuration file.
        """
        return self._optional
    @property
    def options(self) -> list[Option]:
        """Options defined as attributes of this instance.
        """
        return [v for v in vars(self).values() if isinstance(v, Option)]
    @property
    def configs(self) -> list[Config]:
        """Sub-configs defined as attributes of this instance.
        """
        return [v for v in vars(self).values() if isinstance(v, Config)]
