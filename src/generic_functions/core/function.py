"""Higher-order function helpers.

Most helpers return a new callable wrapping the one they receive.
:func:`debounce` and :func:`throttle` are the only ones with time-based
behaviour: trailing invocations run on a daemon :class:`threading.Timer`
thread, and their state is guarded by a lock so the wrappers may be called
from several threads.
"""

from __future__ import annotations

import functools
import inspect
import threading
import time
from collections.abc import Callable, Hashable
from typing import Any

from ._helpers import base_flatten, base_get

__all__ = [
    "Debounced",
    "ary",
    "bind_key",
    "curry",
    "curry_right",
    "debounce",
    "flip",
    "memoize",
    "negate",
    "once",
    "over_args",
    "partial",
    "partial_right",
    "rearg",
    "rest",
    "spread",
    "throttle",
    "unary",
    "wrap",
]


def _arity(func: Callable[..., Any]) -> int:
    """Number of required positional parameters of ``func`` (1 when unknown)."""
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 1
    return sum(
        1
        for param in parameters
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
    )


# ============================================================================
#                               Timing
# ============================================================================


class Debounced:
    """Callable wrapper delaying calls to ``func`` until ``wait`` ms have elapsed.

    Invocations happen on the leading edge, the trailing edge, or both. With
    ``max_wait`` the function is never delayed more than ``max_wait`` ms
    since its previous invocation while calls keep coming in. Each call
    returns the result of the most recent invocation (None before the first).

    Instances expose :meth:`cancel`, :meth:`flush` and :meth:`pending`.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        func: Callable[..., Any],
        wait: float = 0,
        *,
        leading: bool = False,
        trailing: bool = True,
        max_wait: float | None = None,
    ) -> None:
        if wait < 0:
            raise ValueError("wait must be non-negative")
        functools.update_wrapper(self, func)
        self.func = func
        self.wait = wait / 1000
        self.max_wait = None if max_wait is None else max(max_wait, wait) / 1000
        self.leading = leading
        self.trailing = trailing
        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._pending_call: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._last_call_time = float("-inf")
        self._last_invoke_time = float("-inf")
        self._result: Any = None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            now = time.monotonic()
            self._pending_call = (args, kwargs)
            if self._timer is None:
                if self._should_start(now):
                    self._last_invoke_time = now
                    if self.leading:
                        self._invoke()
            else:
                self._timer.cancel()
                if (
                    self.max_wait is not None
                    and now - self._last_invoke_time >= self.max_wait
                ):
                    self._invoke()
            self._last_call_time = now
            self._schedule(now)
            return self._result

    def _should_start(self, now: float) -> bool:
        """Whether a call made while idle opens a new wait period."""
        since_invoke = now - self._last_invoke_time
        if self.max_wait is None:
            return now - self._last_call_time >= self.wait
        # max_wait bounds the gap between invocations from below as well
        return since_invoke >= self.wait and (
            now - self._last_call_time >= self.wait or since_invoke >= self.max_wait
        )

    def _schedule(self, now: float) -> None:
        delay = self.wait
        if self.max_wait is not None:
            delay = min(delay, max(self.max_wait - (now - self._last_invoke_time), 0))
        timer = threading.Timer(delay, self._trailing_edge)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _invoke(self) -> None:
        call, self._pending_call = self._pending_call, None
        if call is None:
            return
        args, kwargs = call
        self._last_invoke_time = time.monotonic()
        self._result = self.func(*args, **kwargs)

    def _trailing_edge(self) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return  # superseded by a newer timer
            self._timer = None
            if self.trailing and self._pending_call is not None:
                self._invoke()
            self._pending_call = None

    def cancel(self) -> None:
        """Drop any delayed invocation."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending_call = None

    def flush(self) -> Any:
        """Run a delayed invocation now, if any, and return the latest result."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
                if self.trailing and self._pending_call is not None:
                    self._invoke()
                self._pending_call = None
            return self._result

    def pending(self) -> bool:
        """Return True while a wait period is running."""
        with self._lock:
            return self._timer is not None


def debounce(
    func: Callable[..., Any],
    wait: float = 0,
    leading: bool = False,
    trailing: bool = True,
    max_wait: float | None = None,
) -> Debounced:
    """Delay invoking ``func`` until ``wait`` milliseconds after the last call.

    Args:
        func: Function to debounce.
        wait: Milliseconds to wait after the last call.
        leading: Invoke on the leading edge of the wait period.
        trailing: Invoke on the trailing edge of the wait period.
        max_wait: Maximum milliseconds ``func`` may be delayed while calls keep coming.

    Returns:
        Debounced: The wrapper, with ``cancel()``, ``flush()`` and ``pending()``.

    Example:
        >>> save = debounce(lambda text: print("saved", text), 200)
        >>> save("a"); save("ab")
        >>> save.flush()
        saved ab
    """
    return Debounced(func, wait, leading=leading, trailing=trailing, max_wait=max_wait)


def throttle(
    func: Callable[..., Any],
    wait: float = 0,
    leading: bool = True,
    trailing: bool = True,
) -> Debounced:
    """Invoke ``func`` at most once every ``wait`` milliseconds.

    A call arriving less than ``wait`` after the previous invocation, including
    a trailing one, is deferred to the end of that period.

    Example:
        >>> ticks = []
        >>> tick = throttle(ticks.append, 1000)
        >>> tick(1); tick(2); tick(3)
        >>> ticks
        [1]
    """
    return Debounced(func, wait, leading=leading, trailing=trailing, max_wait=wait)


# ============================================================================
#                               Arguments
# ============================================================================


def ary(func: Callable[..., Any], n: int | None = None) -> Callable[..., Any]:
    """Create a function calling ``func`` with at most ``n`` positional arguments.

    ``n`` defaults to the number of required positional parameters of ``func``.

    Example:
        >>> list(map(ary(int, 1), ["6", "8", "10"], [2, 2, 2]))
        [6, 8, 10]
    """
    limit = _arity(func) if n is None else max(n, 0)

    @functools.wraps(func)
    def capped(*args: Any, **kwargs: Any) -> Any:
        return func(*args[:limit], **kwargs)

    return capped


def unary(func: Callable[..., Any]) -> Callable[..., Any]:
    """Create a function calling ``func`` with only its first argument."""
    return ary(func, 1)


def flip(func: Callable[..., Any]) -> Callable[..., Any]:
    """Create a function calling ``func`` with its positional arguments reversed.

    Example:
        >>> flip(lambda *args: args)("a", "b", "c")
        ('c', 'b', 'a')
    """

    @functools.wraps(func)
    def flipped(*args: Any, **kwargs: Any) -> Any:
        return func(*reversed(args), **kwargs)

    return flipped


def rearg(func: Callable[..., Any], *indexes: int | list[int]) -> Callable[..., Any]:
    """Create a function calling ``func`` with arguments picked in ``indexes`` order.

    Arguments not referenced by ``indexes`` are appended unchanged.

    Example:
        >>> rearg(lambda a, b, c: [a, b, c], [2, 0, 1])("b", "c", "a")
        ['a', 'b', 'c']
    """
    order = base_flatten(indexes, -1)

    @functools.wraps(func)
    def rearranged(*args: Any, **kwargs: Any) -> Any:
        picked = [args[index] if index < len(args) else None for index in order]
        return func(*picked, *args[len(order) :], **kwargs)

    return rearranged


def over_args(
    func: Callable[..., Any], *transforms: Callable[[Any], Any] | list[Callable[[Any], Any]]
) -> Callable[..., Any]:
    """Create a function transforming each positional argument before calling ``func``.

    Example:
        >>> over_args(lambda x, y: [x, y], lambda n: n * 2, lambda n: n ** 2)(9, 3)
        [18, 9]
    """
    funcs = base_flatten(transforms, 1)

    @functools.wraps(func)
    def transformed(*args: Any, **kwargs: Any) -> Any:
        converted = [
            funcs[index](arg) if index < len(funcs) else arg
            for index, arg in enumerate(args)
        ]
        return func(*converted, **kwargs)

    return transformed


def partial(func: Callable[..., Any], *partials: Any, **kwargs: Any) -> Callable[..., Any]:
    """Create a function with ``partials`` prepended to the arguments it receives.

    Example:
        >>> partial(lambda greeting, name: f"{greeting} {name}", "hi")("fred")
        'hi fred'
    """
    return functools.partial(func, *partials, **kwargs)


def partial_right(
    func: Callable[..., Any], *partials: Any, **partial_kwargs: Any
) -> Callable[..., Any]:
    """Create a function with ``partials`` appended to the arguments it receives.

    Example:
        >>> partial_right(lambda greeting, name: f"{greeting} {name}", "fred")("hi")
        'hi fred'
    """

    @functools.wraps(func)
    def applied(*args: Any, **kwargs: Any) -> Any:
        return func(*args, *partials, **{**partial_kwargs, **kwargs})

    return applied


def rest(func: Callable[..., Any], start: int | None = None) -> Callable[..., Any]:
    """Create a function passing arguments from ``start`` onwards to ``func`` as one list.

    ``start`` defaults to the last parameter of ``func``.

    Example:
        >>> rest(lambda what, names: f"{what} {', '.join(names)}")("hello", "fred", "barney")
        'hello fred, barney'
    """
    position = max(_arity(func) - 1, 0) if start is None else max(start, 0)

    @functools.wraps(func)
    def gathered(*args: Any, **kwargs: Any) -> Any:
        return func(*args[:position], list(args[position:]), **kwargs)

    return gathered


def spread(func: Callable[..., Any], start: int = 0) -> Callable[..., Any]:
    """Create a function spreading the list argument at ``start`` into ``func``.

    Example:
        >>> spread(lambda who, what: f"{who} says {what}")(["fred", "hello"])
        'fred says hello'
    """

    @functools.wraps(func)
    def spreader(*args: Any, **kwargs: Any) -> Any:
        spread_args = list(args[start]) if start < len(args) else []
        return func(*args[:start], *spread_args, **kwargs)

    return spreader


def wrap(value: Any, wrapper: Callable[..., Any]) -> Callable[..., Any]:
    """Create a function calling ``wrapper(value, *args)``.

    Example:
        >>> wrap(str.upper, lambda func, text: f"<p>{func(text)}</p>")("fred")
        '<p>FRED</p>'
    """

    def wrapped(*args: Any, **kwargs: Any) -> Any:
        return wrapper(value, *args, **kwargs)

    return wrapped


# ============================================================================
#                               Invocation control
# ============================================================================


def negate(predicate: Callable[..., Any]) -> Callable[..., bool]:
    """Create a function negating the result of ``predicate``.

    Example:
        >>> list(filter(negate(lambda n: n % 2 == 0), [1, 2, 3, 4, 5, 6]))
        [1, 3, 5]
    """

    @functools.wraps(predicate)
    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated


def once(func: Callable[..., Any]) -> Callable[..., Any]:
    """Create a function invoking ``func`` only on its first call.

    Later calls return the result of the first one.

    Example:
        >>> initialize = once(lambda: print("created"))
        >>> initialize(); initialize()
        created
    """
    lock = threading.Lock()
    state: dict[str, Any] = {}

    @functools.wraps(func)
    def invoke_once(*args: Any, **kwargs: Any) -> Any:
        with lock:
            if "result" not in state:
                state["result"] = func(*args, **kwargs)
            return state["result"]

    return invoke_once


def _cache_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
    key = (args, tuple(sorted(kwargs.items())))
    try:
        hash(key)
    except TypeError:
        return repr(key)
    return key


def memoize(
    func: Callable[..., Any], resolver: Callable[..., Hashable] | None = None
) -> Callable[..., Any]:
    """Create a function caching the results of ``func``.

    The cache key is ``resolver(*args, **kwargs)`` or, by default, built from
    all arguments (unhashable arguments fall back to their ``repr``). The cache
    is a plain dict exposed as the ``cache`` attribute and may be edited.

    Example:
        >>> square = memoize(lambda n: n * n)
        >>> square(4)
        16
        >>> list(square.cache.values())
        [16]
    """
    cache: dict[Hashable, Any] = {}

    @functools.wraps(func)
    def memoized(*args: Any, **kwargs: Any) -> Any:
        key = resolver(*args, **kwargs) if resolver else _cache_key(args, kwargs)
        if key not in memoized.cache:  # type: ignore[attr-defined]
            memoized.cache[key] = func(*args, **kwargs)  # type: ignore[attr-defined]
        return memoized.cache[key]  # type: ignore[attr-defined]

    memoized.cache = cache  # type: ignore[attr-defined]
    return memoized


def _curry(
    func: Callable[..., Any], arity: int, collected: tuple[Any, ...], from_right: bool
) -> Callable[..., Any]:
    @functools.wraps(func)
    def curried(*args: Any) -> Any:
        gathered = args + collected if from_right else collected + args
        if len(gathered) >= arity:
            return func(*gathered)
        return _curry(func, arity, gathered, from_right)

    return curried


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Create a function accepting the arguments of ``func`` over several calls.

    ``func`` is invoked once ``arity`` arguments (default: its required
    positional parameters) have been supplied.

    Example:
        >>> add3 = curry(lambda a, b, c: [a, b, c])
        >>> add3(1)(2)(3)
        [1, 2, 3]
        >>> add3(1, 2)(3)
        [1, 2, 3]
    """
    return _curry(func, _arity(func) if arity is None else arity, (), False)


def curry_right(func: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Like :func:`curry`, but arguments are supplied from the right.

    Example:
        >>> curry_right(lambda a, b, c: [a, b, c])(3)(2)(1)
        [1, 2, 3]
        >>> curry_right(lambda a, b, c: [a, b, c])(2, 3)(1)
        [1, 2, 3]
    """
    return _curry(func, _arity(func) if arity is None else arity, (), True)


def bind_key(obj: Any, key: Any, *partials: Any) -> Callable[..., Any]:
    """Create a function calling the method ``obj[key]`` (or ``obj.key``) with ``partials``.

    The method is looked up on every call, so it may be redefined later.

    Raises:
        TypeError: When called and the value at ``key`` is not callable.

    Example:
        >>> user = {"greet": lambda greeting, punct: f"{greeting} fred{punct}"}
        >>> bound = bind_key(user, "greet", "hi")
        >>> bound("!")
        'hi fred!'
    """

    def bound(*args: Any, **kwargs: Any) -> Any:
        method = base_get(obj, key, None)
        if not callable(method):
            raise TypeError(f"Expected {key!r} to be a callable member of {obj!r}")
        return method(*partials, *args, **kwargs)

    return bound
