"""Stable identity keys for registered listeners.

A registry stores each listener under a :class:`ListenerKey` so the same
listener can be recognised again when it is added a second time or passed to
``remove_listener``. Python creates a fresh bound-method object on every
attribute access, so comparing listener objects directly would never match
``obj.handler`` against a previously registered ``obj.handler``.

Key kinds:

- ``"function"``: module-level functions, static methods reached through their
  class and builtin functions, keyed by module and qualified name.
- ``"method"``: bound methods, keyed by the identity of the bound instance and
  the method name, or by the class path for classmethods.
- ``"object"``: everything else (lambdas, closures including those made by
  ``functools.wraps`` decorators, ``functools.partial``, callable instances),
  keyed by object identity.
"""

from __future__ import annotations

from dataclasses import dataclass
import types
from typing import Any
from typing import Literal

KeyKind = Literal["function", "method", "object"]


@dataclass(frozen=True)
class ListenerKey:
    kind: KeyKind
    ident: Any

    def __str__(self) -> str:
        if self.kind == "function":
            module, qualname = self.ident
            return f"{module}.{qualname}"
        if self.kind == "method":
            if len(self.ident) == 3:
                module, qualname, name = self.ident
                return f"{module}.{qualname}.{name}"
            owner_id, name = self.ident
            return f"<0x{owner_id:x}>.{name}"
        return f"<object 0x{self.ident:x}>"


def _is_named(fn: Any) -> bool:
    # "<lambda>" and "outer.<locals>.inner" are not stable names
    qualname = getattr(fn, "__qualname__", None)
    if not isinstance(qualname, str) or "<" in qualname:
        return False
    if isinstance(fn, types.BuiltinFunctionType):
        return True
    # functools.wraps copies __qualname__ onto the wrapping closure
    return fn.__closure__ is None and not hasattr(fn, "__wrapped__")


def listener_key(listener: Any) -> ListenerKey:
    """Return the identity key for ``listener``.

    Raises:
        TypeError: If ``listener`` is not callable.
    """
    if not callable(listener):
        msg = f"listener must be callable, not {type(listener).__name__}"
        raise TypeError(msg)

    owner = getattr(listener, "__self__", None)
    name = getattr(listener, "__name__", None)
    if owner is not None and name is not None and not isinstance(owner, types.ModuleType):
        if isinstance(owner, type):
            return ListenerKey("method", (owner.__module__, owner.__qualname__, name))
        return ListenerKey("method", (id(owner), name))

    if isinstance(listener, (types.FunctionType, types.BuiltinFunctionType)) and _is_named(listener):
        return ListenerKey("function", (listener.__module__, listener.__qualname__))

    return ListenerKey("object", id(listener))
