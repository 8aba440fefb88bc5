import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)


class HookRegistrar:
    """Maps hook names to handlers, run synchronously in registration order."""

    def __init__(self):
        self._handlers: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        self._handlers[name].append(handler)

    def on(self, name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            self.register(name, handler)
            return handler

        return decorator

    def handlers(self, name: str) -> list[Callable[..., Any]]:
        return list(self._handlers.get(name, []))

    def run(self, name: str, *args: Any) -> list[Any]:
        results = []
        for handler in self.handlers(name):
            logger.debug(f"Running {name} handler {getattr(handler, '__qualname__', handler)}")
            results.append(handler(*args))
        return results
