"""
Function composition helpers.

The public solvers take their options first and their data last, so a
configured solver can be built once and applied across many datasets:

    >>> fit2 = regression.fit({'precision': 2})
    >>> results = [fit2(series) for series in all_series]

curry() provides that partial application; pipe() chains the steps.
"""

from functools import reduce, wraps
import inspect
from typing import Any, Callable


def _required_positional(fn: Callable[..., Any]) -> tuple[str, ...]:
    """Names of the required positional parameters of fn, in order."""
    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    return tuple(
        p.name for p in inspect.signature(fn).parameters.values()
        if p.kind in positional and p.default is inspect.Parameter.empty
    )


def curry(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Curried version of fn.

    Calling with all required positional arguments executes fn immediately;
    calling with fewer returns a function that waits for the rest. Keyword
    arguments count toward the required parameters they name and are passed
    through on the executing call.

    Args:
        fn: Function to curry. Its data argument should come last.

    Returns:
        Curried function with fn's name and docstring.

    Example:
        >>> @curry
        ... def scale(factor, values):
        ...     return [factor * v for v in values]
        >>> scale(2)([1, 2])
        [2, 4]
        >>> scale(2, [1, 2])
        [2, 4]
    """
    required = _required_positional(fn)

    @wraps(fn)
    def curried(*args: Any, **kwargs: Any) -> Any:
        supplied = len(args) + sum(1 for name in required[len(args):] if name in kwargs)
        if supplied >= len(required):
            return fn(*args, **kwargs)

        def waiting(*more: Any, **more_kwargs: Any) -> Any:
            return curried(*args, *more, **{**kwargs, **more_kwargs})

        return waiting

    return curried


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Compose single-argument functions left to right.

    pipe(f, g, h)(x) == h(g(f(x))). With no functions, returns identity.

    Example:
        >>> insights_for = pipe(fit({}), generate_insights({}))
        >>> insights_for([[1, 2], [2, 4], [3, 6]]).ok
        True
    """
    def piped(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), fns, value)

    return piped
