"""
adapts caller-supplied callbacks to the (value, index, source) convention.

every callback-taking operation hands its callback the same full argument
list. python callables usually declare fewer parameters than that, so the
adapter inspects the signature once and passes only the leading arguments
the callable can accept. a keyword-only parameter named ``this`` receives the
context object (the ``this_arg`` of the operation, or the sequence itself).

defaulted positional parameters count toward the arity, so
``lambda v, k=k: v * k`` receives the index as ``k``. bind extra values with
``functools.partial`` or a keyword-only parameter (``lambda v, *, k=k: v * k``).
"""
from __future__ import annotations
import inspect
from functools import partial
from .types import *

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _is_plain_python_callable(func: Callable) -> bool:
    return inspect.isfunction(func) or inspect.ismethod(func) or isinstance(func, partial)


def _inspect_callback(func: Callable, min_args: int) -> Tuple[Optional[int], bool]:
    """returns (positional arity or none for all, whether `this` is accepted)"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # some builtins expose no signature at all
        return min_args, False

    params = list(signature.parameters.values())
    wants_this = any(p.name == 'this' and p.kind is inspect.Parameter.KEYWORD_ONLY for p in params)

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return None, wants_this

    positional = [p for p in params if p.kind in _POSITIONAL]
    if _is_plain_python_callable(func):
        return len(positional), wants_this

    # classes and builtins: only what they require, e.g. int(value) rather than int(value, index)
    required = sum(1 for p in positional if p.default is inspect.Parameter.empty)
    return max(required, min_args), wants_this


class Callback:
    """a callable wrapper that trims arguments and threads the context object"""

    __slots__ = ('func', 'context', '_arity', '_wants_this')

    def __init__(self, func: Callable, context: Any, min_args: int = 1):
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self.func = func
        self.context = context
        self._arity, self._wants_this = _inspect_callback(func, min_args)

    def __call__(self, *args: Any) -> Any:
        if self._arity is not None:
            args = args[:self._arity]
        if self._wants_this:
            return self.func(*args, this=self.context)
        return self.func(*args)

    def __repr__(self) -> str:
        return f"Callback({self.func!r}, arity={self._arity})"


def bind(func: Callable, this_arg: Any, source: Any, min_args: int = 1) -> Callback:
    """wrap `func`, using `source` as the context when `this_arg` was omitted"""
    context = source if this_arg is MISSING else this_arg
    return Callback(func, context, min_args)
