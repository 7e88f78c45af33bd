# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/strconv.py
# DESCRIPTION:    Data conversion from/to string
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

"""tabconf-core - Data conversion from/to string

Every value stored in a compound option is kept as text. This module is the single
place that knows how to turn a typed value into that text and back. Convertors are
registered per type, and looked up by the type itself (falling back to its bases
in MRO order) or by type name.

Built-in convertors cover `str`, `int`, `float`, `complex`, `Decimal`, `UUID`,
`bool`, and `Enum`, `IntEnum`, `Flag` and `IntFlag` descendants.

Example::

    from decimal import Decimal
    from tabconf.core.strconv import convert_to_str, convert_from_str, is_convertible

    convert_to_str(Decimal('12.50'))   # '12.50'
    convert_from_str(bool, 'on')       # True
    convert_to_str(False)              # 'no'
    is_convertible(int, '2.5')         # False
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from decimal import Decimal, DecimalException
from enum import Enum, Flag, IntEnum, IntFlag
from typing import Any, TypeAlias
from uuid import UUID

from .collections import Registry
from .types import Distinct

#: Function that converts typed value to its string representation.
TConvertToStr: TypeAlias = Callable[[Any], str]
#: Function that converts string representation of typed value to typed value.
TConvertFromStr: TypeAlias = Callable[[type, str], Any]

@dataclass(eq=False)
class Convertor(Distinct):
    """Data convertor registry entry.

    Arguments:
        cls: Data type handled by this convertor.
        to_str: Function converting an instance of `cls` to string.
        from_str: Function converting a string to an instance of `cls`.
    """
    #: Data type handled by this convertor.
    cls: type
    #: Function converting an instance of `cls` to string.
    to_str: TConvertToStr
    #: Function converting a string to an instance of `cls`.
    from_str: TConvertFromStr
    def get_key(self) -> Hashable:
        """Returns instance key (the class itself).
        """
        return self.cls
    @property
    def name(self) -> str:
        """Simple type name (e.g. 'int', 'Decimal').
        """
        return self.cls.__name__
    @property
    def full_name(self) -> str:
        """Type name including source module (e.g. 'decimal.Decimal').
        """
        return f'{self.cls.__module__}.{self.cls.__name__}'

_convertors: Registry = Registry()
_classes: dict[str, type] = {}

#: Valid string literals for True value.
TRUE_STR: list[str] = ['yes', 'true', 'on', 'y', '1']
#: Valid string literals for False value.
FALSE_STR: list[str] = ['no', 'false', 'off', 'n', '0']

def any2str(value: Any) -> str:
    """Converts value to string using `str(value)`. Default `to_str` function.
    """
    return str(value)

def str2any(cls: type, value: str) -> Any:
    """Converts string to value using `cls(value)`. Default `from_str` function.
    """
    return cls(value)

def register_convertor(cls: type, *, to_str: TConvertToStr=any2str,
                       from_str: TConvertFromStr=str2any) -> None:
    """Registers convertor functions for a data type.

    Arguments:
        cls:      Class to register convertor for.
        to_str:   Function that converts an instance of `cls` to `str`.
        from_str: Function that converts `str` to value of `cls` data type.

    Raises:
        ValueError: When convertor for `cls` is already registered.

    Example::

        from datetime import date

        register_convertor(date, to_str=date.isoformat,
                           from_str=lambda cls, value: cls.fromisoformat(value))
    """
    _convertors.store(Convertor(cls, to_str, from_str))

def register_class(cls: type) -> None:
    """Registers a class name for lookup by name.

    It's needed for classes that don't have their own convertor (they use one
    registered for a base class), but should be available by name, for example
    in option schemas declared with type names.

    Raises:
        TypeError: When the simple class name is already registered.
    """
    if cls.__name__ in _classes:
        raise TypeError(f"Class '{cls.__name__}' already registered as '{_classes[cls.__name__]!r}'")
    _classes[cls.__name__] = cls

def _get_convertor(cls: type | str) -> Convertor | None:
    if isinstance(cls, str):
        cls = _classes.get(cls, cls)
    if isinstance(cls, str):
        attr = 'full_name' if '.' in cls else 'name'
        return _convertors.find(lambda conv: getattr(conv, attr) == cls)
    if (conv := _convertors.get(cls)) is None:
        for base in cls.__mro__:
            if (conv := _convertors.get(base)) is not None:
                break
    return conv

def has_convertor(cls: type | str) -> bool:
    """Returns True if a convertor is registered for the class or its bases.

    Arguments:
        cls: Type object or type name (simple, or including the module).
    """
    return _get_convertor(cls) is not None

def get_convertor(cls: type | str) -> Convertor:
    """Returns the Convertor registered for a data type or its bases.

    Arguments:
        cls: Type object or type name (simple, or including the module).

    Raises:
        TypeError: If there is no convertor for `cls` or any of its bases.
    """
    if (conv := _get_convertor(cls)) is None:
        raise TypeError(f"Type '{cls.__name__ if isinstance(cls, type) else cls}' has no Convertor")
    return conv

def update_convertor(cls: type | str, *, to_str: TConvertToStr | None=None,
                     from_str: TConvertFromStr | None=None) -> None:
    """Update the `to_str` and/or `from_str` functions of an existing convertor.

    Raises:
        TypeError: If the data type has no registered convertor.
    """
    conv: Convertor = get_convertor(cls)
    if to_str:
        conv.to_str = to_str
    if from_str:
        conv.from_str = from_str

def resolve_type(cls: type | str) -> type:
    """Returns data type for a type object or type name.

    Names registered with `register_class()` resolve to that class, other names
    resolve to the class of the matching convertor.

    Raises:
        TypeError: If there is no convertor for the type.
    """
    if isinstance(cls, str):
        if cls in _classes:
            return _classes[cls]
        return get_convertor(cls).cls
    get_convertor(cls)
    return cls

def convert_to_str(value: Any) -> str:
    """Converts value to string using the convertor registered for its class.

    Raises:
        TypeError: If there is no convertor for the value's class or its bases.
    """
    return get_convertor(value.__class__).to_str(value)

def convert_from_str(cls: type | str, value: str) -> Any:
    """Converts string to value of the specified type.

    Raises:
        TypeError: If there is no convertor for `cls` or its bases.
        ValueError: When `value` is not a valid string representation for `cls`.
    """
    return get_convertor(cls).from_str(resolve_type(cls), value)

def is_convertible(cls: type | str, value: str) -> bool:
    """Returns True if `value` could be converted to `cls` with `convert_from_str()`.

    Raises:
        TypeError: If there is no convertor for `cls` or its bases.
    """
    conv = get_convertor(cls)
    try:
        conv.from_str(resolve_type(cls), value)
    except (ValueError, TypeError, KeyError, ArithmeticError):
        return False
    return True

def _register() -> None:
    """Registration of builtin convertors."""

    def bool2str(value: bool) -> str: # noqa: FBT001
        return TRUE_STR[0] if value else FALSE_STR[0]
    def str2bool(type_: type, value: str) -> bool: # noqa: ARG001
        if (v := value.lower()) in TRUE_STR:
            return True
        if v not in FALSE_STR:
            raise ValueError("Value is not a valid bool string constant")
        return False
    def str2decimal(type_: type, value: str) -> Decimal:
        try:
            return type_(value)
        except DecimalException as exc:
            raise ValueError(f"could not convert string to {type_.__name__}: '{value}'") from exc
    def enum2str(value: Enum) -> str:
        return value.name
    def str2enum(cls: type, value: str) -> Enum:
        members = {k.lower(): v for k, v in cls.__members__.items()}
        if (member := members.get(value.lower())) is None:
            raise ValueError(f"'{value}' is not a valid member of enum {cls.__name__}")
        return member
    def flag2str(value: Flag) -> str:
        if value.name is not None:
            return value.name
        return '|'.join(m.name for m in type(value) if m.value and m in value)
    def str2flag(cls: type, value: str) -> Flag:
        members = {k.lower(): v for k, v in cls.__members__.items()}
        result = cls(0)
        if not value.strip():
            return result
        for item in value.lower().split('|'):
            if (member := members.get(item.strip())) is None:
                raise ValueError(f"'{item.strip()}' is not a valid member of flag {cls.__name__}")
            result |= member
        return result

    register_convertor(str)
    register_convertor(int)
    register_convertor(float)
    register_convertor(complex)
    register_convertor(Decimal, from_str=str2decimal)
    register_convertor(UUID)
    register_convertor(bool, to_str=bool2str, from_str=str2bool)
    register_convertor(Enum, to_str=enum2str, from_str=str2enum)
    register_convertor(Flag, to_str=flag2str, from_str=str2flag)
    # IntEnum and IntFlag must be registered, 'int' is before Enum in their MRO
    register_convertor(IntEnum, to_str=enum2str, from_str=str2enum)
    register_convertor(IntFlag, to_str=flag2str, from_str=str2flag)

_register()
del _register
