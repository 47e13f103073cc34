"""Hook system for API clients.

Hooks are plain callables receiving a frozen call context. Pre-hooks run
before the wrapped call, post-hooks always run after it, error-hooks run
only when the call raises. Exceptions are never swallowed.

Example:
    >>> @with_hooks(hooks=Hooks(pre_hooks=[metrics_hook]))
    ... class MyApi:
    ...     _hooks: Hooks
    ...
    ...     def __init__(self, hooks: Hooks | None = None) -> None: ...
    ...
    ...     @invoke_with_hooks(lambda self: CallContext(method="thing.get"))
    ...     def get_thing(self) -> Thing: ...
"""

import contextlib
import functools
from collections.abc import Callable, Generator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Hooks:
    """Collection of hooks invoked around API calls.

    Attributes:
        pre_hooks: Called before the API call
        post_hooks: Called after the API call, success or failure
        error_hooks: Called when the API call raises
    """

    pre_hooks: Sequence[Callable[[Any], None]] = field(default_factory=tuple)
    post_hooks: Sequence[Callable[[Any], None]] = field(default_factory=tuple)
    error_hooks: Sequence[Callable[[Any], None]] = field(default_factory=tuple)

    def merge(self, other: "Hooks | None") -> "Hooks":
        """Return new Hooks with other's hooks appended after ours."""
        if other is None:
            return self
        return Hooks(
            pre_hooks=(*self.pre_hooks, *other.pre_hooks),
            post_hooks=(*self.post_hooks, *other.post_hooks),
            error_hooks=(*self.error_hooks, *other.error_hooks),
        )


@contextlib.contextmanager
def hook_context[T](context: T, hooks: Hooks) -> Generator[None, Any, None]:
    for hook in hooks.pre_hooks:
        hook(context)
    try:
        yield
    except Exception:
        for hook in hooks.error_hooks:
            hook(context)
        raise
    finally:
        for hook in hooks.post_hooks:
            hook(context)


def invoke_with_hooks[T](
    context_factory: Callable[[Any], T],
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Method decorator running the instance's hooks around the call.

    Args:
        context_factory: Builds the call context from the instance (self)

    The instance must provide a ``_hooks`` attribute (see with_hooks).
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            with hook_context(context_factory(self), self._hooks):
                return func(self, *args, **kwargs)

        return wrapper

    return decorator


def with_hooks[C: type](hooks: Hooks) -> Callable[[C], C]:
    """Class decorator installing built-in hooks on every instance.

    Custom hooks passed to the constructor as ``hooks=`` are merged after
    the built-in ones and stored as ``self._hooks``.
    """

    def decorator(cls: C) -> C:
        original_init = cls.__init__

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:  # noqa: N807
            original_init(self, *args, **kwargs)
            self._hooks = hooks.merge(kwargs.get("hooks"))

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator
