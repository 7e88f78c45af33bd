# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/collections.py
# DESCRIPTION:    Collection types
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

"""tabconf-core - Collection types

This module provides two containers used across `tabconf.core`:

* `DataList` - a `list` that accepts only items of specified type(s), and that
  could be frozen to prevent any further change. Option schemas are frozen
  `DataList` instances.
* `Registry` - a mapping of `.Distinct` objects keyed by the value returned from
  their `get_key()` method. The `.strconv` convertors are kept in a `Registry`.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from operator import methodcaller
from typing import Any, TypeAlias, TypeVar, cast

from .types import Distinct, Error

_T = TypeVar("_T")
Item = TypeVar("Item")
#: Type specification for `DataList` items.
TypeSpec: TypeAlias = type | tuple[type, ...]
#: Function that returns the key of a `DataList` item.
KeyFunc: TypeAlias = Callable[[Any], Hashable]

class DataList(list[Item]):
    """List of items with optional type constraint and frozen state.

    Arguments:
        items:     Sequence to initialize the list.
        type_spec: Reject instances that are not instances of specified type(s).
        key:       Function returning the key of an item, used by `get()`. If all
                   classes in `type_spec` are `.Distinct` descendants, the default
                   is `item.get_key()`.
        frozen:    Create frozen list.

    Raises:
        TypeError: When initialization sequence contains an instance of wrong type.
    """
    def __init__(self, items: Iterable | None=None, type_spec: TypeSpec | None=None,
                 key: KeyFunc | None=None, *, frozen: bool=False):
        super().__init__()
        if type_spec is not None and key is None:
            specs = type_spec if isinstance(type_spec, tuple) else (type_spec, )
            if all(issubclass(ts, Distinct) for ts in specs):
                key = methodcaller('get_key')
        self._type_spec: TypeSpec | None = type_spec
        self._key: KeyFunc | None = key
        self.__frozen: bool = False
        self.__map: dict | None = None
        if items is not None:
            self.extend(items)
        if frozen:
            self.freeze()
    def __valchk(self, value: Item) -> None:
        if self._type_spec is not None and not isinstance(value, self._type_spec):
            raise TypeError(f"Value is not an instance of allowed class, "
                            f"got '{type(value).__name__}'")
    def __updchk(self) -> None:
        if self.__frozen:
            raise TypeError(f"Cannot modify frozen {self.__class__.__name__}")
    def __setitem__(self, index: int | slice, value: Item | Iterable[Item]) -> None:
        self.__updchk()
        if isinstance(index, slice):
            value = list(value)
            for val in value:
                self.__valchk(val)
        else:
            self.__valchk(value)
        super().__setitem__(index, value)
    def __delitem__(self, index: int | slice) -> None:
        self.__updchk()
        super().__delitem__(index)
    def __iadd__(self, other: Iterable[Item]) -> DataList:
        self.extend(other)
        return self
    def __imul__(self, value: int) -> DataList:
        self.__updchk()
        return super().__imul__(value)
    def sort(self, *, key: Callable | None=None, reverse: bool=False) -> None:
        """Sort items in place.

        Raises:
            TypeError: When list is frozen.
        """
        self.__updchk()
        super().sort(key=key, reverse=reverse)
    def reverse(self) -> None:
        """Reverse items in place.

        Raises:
            TypeError: When list is frozen.
        """
        self.__updchk()
        super().reverse()
    def insert(self, index: int, item: Item) -> None:
        """Insert item before index.

        Raises:
            TypeError: When `item` has wrong type, or list is frozen.
        """
        self.__updchk()
        self.__valchk(item)
        super().insert(index, item)
    def append(self, item: Item) -> None:
        """Add an item to the end of the list.

        Raises:
            TypeError: When `item` has wrong type, or list is frozen.
        """
        self.__updchk()
        self.__valchk(item)
        super().append(item)
    def extend(self, iterable: Iterable[Item]) -> None:
        """Extend the list by appending all the items from the iterable.

        Raises:
            TypeError: When any item has wrong type, or list is frozen.
        """
        for item in iterable:
            self.append(item)
    def remove(self, item: Item) -> None:
        """Remove first occurrence of item.

        Raises:
            TypeError: When list is frozen.
        """
        self.__updchk()
        super().remove(item)
    def pop(self, index: int=-1) -> Item:
        """Remove and return item at index (default last).

        Raises:
            TypeError: When list is frozen.
        """
        self.__updchk()
        return super().pop(index)
    def clear(self) -> None:
        """Remove all items from the list.

        Raises:
            TypeError: When list is frozen.
        """
        self.__updchk()
        super().clear()
    def freeze(self) -> None:
        """Set list to immutable (frozen) state.

        Frozen list also builds an internal map from item keys to item index that
        speeds up `get()`.
        """
        self.__frozen = True
        if self._key is not None:
            self.__map = {self._key(item): index for index, item in enumerate(self)}
    def get(self, key: Any, default: _T=None) -> Item | _T:
        """Returns item with given key, or `default` when there is no such item.

        Raises:
            Error: If key function is not defined.
        """
        if self._key is None:
            raise Error("Key function required")
        if self.__map is not None:
            i = self.__map.get(key)
            return default if i is None else self[i]
        for item in self:
            if self._key(item) == key:
                return item
        return default
    @property
    def frozen(self) -> bool:
        """True if list items couldn't be changed.
        """
        return self.__frozen
    @property
    def type_spec(self) -> TypeSpec | None:
        """Valid type(s) for list items, or `None` if there is no such constraint.
        """
        return self._type_spec

class Registry(Mapping[Any, Distinct]):
    """Mapping container for `.Distinct` objects.

    Any method that expects a `key` also accepts a `.Distinct` instance. Iteration
    yields stored objects, not keys.

    Arguments:
        data: Either a `.Distinct` instance, or sequence or mapping of `.Distinct`
              instances.
    """
    def __init__(self, data: Distinct | Mapping[Any, Distinct] | Sequence[Distinct] | None=None):
        self._reg: dict[Any, Distinct] = {}
        if data:
            self.update(data)
    def __len__(self):
        return len(self._reg)
    def __getitem__(self, key: Any) -> Distinct:
        return self._reg[key.get_key() if isinstance(key, Distinct) else key]
    def __setitem__(self, key: Any, value: Distinct) -> None:
        assert isinstance(value, Distinct) # noqa: S101
        self._reg[key.get_key() if isinstance(key, Distinct) else key] = value
    def __delitem__(self, key: Any) -> None:
        del self._reg[key.get_key() if isinstance(key, Distinct) else key]
    def __iter__(self) -> Iterator[Distinct]:
        return iter(self._reg.values())
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}([{', '.join(repr(x) for x in self)}])"
    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Distinct):
            item = item.get_key()
        return item in self._reg
    def clear(self) -> None:
        """Remove all items from registry.
        """
        self._reg.clear()
    def get(self, key: Any, default: _T=None) -> Distinct | _T:
        """Returns item for key, or `default` if key is not registered.
        """
        return self._reg.get(key.get_key() if isinstance(key, Distinct) else key, default)
    def find(self, predicate: Callable[[Distinct], bool], default: _T=None) -> Distinct | _T:
        """Returns first item for which `predicate` returns True, or `default`.
        """
        return next((item for item in self if predicate(item)), default)
    def store(self, item: Distinct) -> Distinct:
        """Register an item.

        Raises:
            ValueError: When item is already registered.
        """
        assert isinstance(item, Distinct), f"Item is not of type '{Distinct.__name__}'" # noqa: S101
        key = item.get_key()
        if key in self._reg:
            raise ValueError(f"Item already registered, key: '{key}'")
        self._reg[key] = item
        return item
    def remove(self, item: Distinct) -> None:
        """Removes item from registry (same as: del R[item]).
        """
        del self._reg[item.get_key()]
    def update(self, _from: Distinct | Mapping[Any, Distinct] | Sequence[Distinct]) -> None:
        """Store or replace one or more items.

        Arguments:
            _from: Either a `.Distinct` instance, or sequence or mapping of `.Distinct`
                   instances.
        """
        if isinstance(_from, Distinct):
            self[_from] = _from
        else:
            for item in cast(Mapping, _from).values() if hasattr(_from, 'values') else _from:
                self[item] = item
