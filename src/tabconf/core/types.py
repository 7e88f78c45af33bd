# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/types.py
# DESCRIPTION:    Common exceptions and base types
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

"""tabconf-core - Common exceptions and base types

This module provides the small set of building blocks shared by the other
`tabconf.core` modules:

- The base exception class (`Error`) and the exception signalling a broken
  caller contract in typed option access (`ContractError`).
- Base class for objects with identity defined by a key (`Distinct`), used by
  registries.
- Known values of the advisory compound option type hint (`TypeHint`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from enum import Enum
from typing import Any

# Exceptions

class Error(Exception):
    """Exception intended as a base for application-related errors.

    Keyword arguments passed to the constructor are stored as instance attributes.
    Lookup of any attribute that was not set returns `None`.

    Example::

        try:
            raise Error("Bad value", option='bindings', row=3)
        except Error as e:
            if e.row is not None:
                ...
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args)
        for name, value in kwargs.items():
            setattr(self, name, value)
    def __getattr__(self, name) -> Any | None:
        # __notes__ must raise so that `add_note` keeps working
        if name == '__notes__':
            raise AttributeError
        return None

class ContractError(Error):
    """Typed access to an option does not match the option schema.

    Raised when the number of types (or tuple items) passed to a typed accessor
    differs from the number of declared columns, or when stored text cannot be
    converted to the type requested by the caller. It signals a programming error
    at the call site, never bad configuration data, so it should not be caught
    and handled as such.
    """

# Base classes

class Distinct(ABC):
    """Abstract base class for objects with distinct instances based on a key.

    Instances are equal when their keys returned by `get_key()` are equal, and
    the hash of an instance is the hash of its key.

    Important:
        When used with `@dataclass`, it must be declared with `eq=False` to keep
        the `__eq__` and `__hash__` defined here.
    """
    @abstractmethod
    def get_key(self) -> Hashable:
        """Returns the hashable key identifying this instance.
        """
    def __hash(self) -> int:
        return hash(self.get_key())
    def __eq__(self, other) -> bool:
        if isinstance(other, Distinct):
            return self.get_key() == other.get_key()
        return False
    __hash__ = __hash

# Enums

class TypeHint(str, Enum):
    """Known values of the compound option type hint.

    The hint tells config writers how the rows are meant to be presented. It's
    advisory only: options accept any string and never check it against the
    actual row structure.
    """
    #: Rows are a plain list, names are just positions.
    PLAIN = 'plain'
    #: Rows map a key (the row name) to a single value.
    DICT = 'dict'
    #: Rows are named tuples.
    TUPLE = 'tuple'
