# SPDX-FileCopyrightText: 2026-present The tabconf Project contributors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: tabconf-core
# FILE:           tabconf/core/signal.py
# DESCRIPTION:    Callback system based on Signals and Slots
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

"""tabconf-core - Callback system based on Signals and Slots

Options announce changes of their value through signals. A signal is defined on a
class with the `signal` decorator, and each instance gets its own `Signal` object
the first time the attribute is accessed. Any number of slots (callbacks) may be
connected to a signal, and all of them are called synchronously when the signal
is emitted. Slot return values are ignored.

Slots may be functions, bound methods, lambdas or `functools.partial` objects.
Their signature must match the signature of the decorated function (without
`self`), which is verified with `inspect` on connection.

Example::

    class Watched:
        @signal
        def changed(self) -> None:
            "Emitted when something changes."

    def on_change():
        print('changed')

    obj = Watched()
    obj.changed.connect(on_change)
    obj.changed.emit()   # prints 'changed'
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from inspect import Signature, ismethod
from typing import Any
from weakref import ReferenceType, WeakKeyDictionary, ref


def _is_strong(slot: Callable) -> bool:
    return isinstance(slot, partial) or getattr(slot, '__name__', None) == '<lambda>'

class Signal:
    """Connection point between a signal and its slots.

    Arguments:
        signature: Signature that slots must match.

    Important:
        The match must be exact in parameter names, kinds, order and annotations.
        The only tolerated difference are excess slot keyword arguments with
        default values. Return annotations are ignored.

    Note:
        Functions are held by weak reference and bound methods by weak reference
        to their instance, so connecting a slot doesn't keep it alive. Lambdas and
        partials are held by strong reference.
    """
    def __init__(self, signature: Signature):
        self._sig: Signature = signature.replace(parameters=[p for p in signature.parameters.values()
                                                             if p.name != 'self'],
                                                 return_annotation=Signature.empty)
        #: When True, `emit()` does nothing.
        self.block: bool = False
        self._slots: list[Callable | ReferenceType[Callable]] = []
        self._islots: WeakKeyDictionary = WeakKeyDictionary()
    def __call__(self, *args, **kwargs):
        """Shortcut for `emit(*args, **kwargs)`."""
        self.emit(*args, **kwargs)
    def __len__(self) -> int:
        return len(self._slots) + len(self._islots)
    def _kw_test(self, sig: Signature) -> bool:
        p = sig.parameters
        result = False
        for k in set(p).difference(set(self._sig.parameters)):
            result = True
            if p[k].default is Signature.empty:
                return False
        return result
    def emit(self, *args, **kwargs) -> None:
        """Calls all connected slots with given arguments, unless signal is blocked.
        """
        if self.block:
            return
        for slot in list(self._slots):
            if isinstance(slot, ref):
                if (t_slot := slot()) is not None:
                    t_slot(*args, **kwargs)
            else:
                slot(*args, **kwargs)
        for obj, method in list(self._islots.items()):
            method(obj, *args, **kwargs)
    def connect(self, slot: Callable) -> None:
        """Connect a slot to this signal. Connecting the same slot again has no effect.

        Raises:
            ValueError: If `slot` is not callable, or its signature does not match
                        the signal signature.
        """
        if not callable(slot):
            raise ValueError(f"Connection to non-callable '{slot.__class__.__name__}' object failed")
        sig = Signature.from_callable(slot).replace(return_annotation=Signature.empty)
        if str(sig) != str(self._sig) and not self._kw_test(sig):
            raise ValueError("Callable signature does not match the signal signature")
        if _is_strong(slot):
            if slot not in self._slots:
                self._slots.append(slot)
        elif ismethod(slot):
            self._islots[slot.__self__] = slot.__func__
        else:
            new_slot_ref = ref(slot)
            if new_slot_ref not in self._slots:
                self._slots.append(new_slot_ref)
    def disconnect(self, slot: Callable) -> None:
        """Disconnect a slot. Does nothing if the slot is not connected.
        """
        if not callable(slot):
            return
        if ismethod(slot):
            self._islots.pop(slot.__self__, None)
            return
        target = slot if _is_strong(slot) else ref(slot)
        if target in self._slots:
            self._slots.remove(target)
    def clear(self) -> None:
        """Disconnect all slots.
        """
        self._slots.clear()
        self._islots.clear()

class signal: # noqa: N801
    """Decorator that defines a read-only `Signal` property on a class.

    The decorated function defines the slot signature, its body is never executed.
    Each instance of the class gets its own `Signal`.
    """
    def __init__(self, fget: Callable, doc: str | None=None):
        self._sig_: Signature = Signature.from_callable(fget)
        self._map: WeakKeyDictionary[Any, Signal] = WeakKeyDictionary()
        if doc is None and fget is not None:
            doc = fget.__doc__
        self.__doc__ = doc
    def __get__(self, obj, objtype):
        if obj is None:
            return self
        if obj not in self._map:
            self._map[obj] = Signal(self._sig_)
        return self._map[obj]
    def __set__(self, obj, val):
        raise AttributeError("Can't assign to signal")
    def __delete__(self, obj):
        raise AttributeError("Can't delete signal")
