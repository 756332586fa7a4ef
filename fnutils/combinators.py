import functools
import inspect

POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def required_positional(func) -> int:
    count = 0
    for param in inspect.signature(func).parameters.values():
        if param.kind not in POSITIONAL or param.default is not param.empty:
            break
        count += 1
    return count


def curry(func, arity: int | None = None):
    """
    Collect positional arguments across calls until there are at least
    `arity` of them, then call func.

    arity defaults to the number of leading positional parameters that have
    no default value.
    """
    if arity is None:
        arity = required_positional(func)

    @functools.wraps(func)
    def curried(*args):
        if len(args) >= arity:
            return func(*args)
        return functools.partial(curried, *args)

    return curried


def partial(func, *args, **kwargs):
    @functools.wraps(func)
    def partially_applied(*more_args, **more_kwargs):
        return func(*args, *more_args, **kwargs, **more_kwargs)

    return partially_applied


def pipe(*funcs):
    """
    Chain funcs left to right: the first one receives the call arguments,
    every later one the previous result.
    """

    def piped(*args, **kwargs):
        if not funcs:
            return args[0] if args else None
        first, *rest = funcs
        result = first(*args, **kwargs)
        for func in rest:
            result = func(result)
        return result

    return piped


def compose(*funcs):
    # compose(h, g, f)(x) == h(g(f(x)))
    return pipe(*reversed(funcs))
