# Standard library imports
from typing import Any, Callable, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class BaseContainer:
    """
    Minimal dependency injection container.

    Holds singletons (one shared instance) and factories (a new instance per
    lookup), keyed by type.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Type[Any], Any] = {}
        self._factories: Dict[Type[Any], Callable[[], Any]] = {}

    def register_singleton(self, key: Type[T], instance: T) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Type[T], factory: Callable[[], T]) -> None:
        self._factories[key] = factory

    def get(self, key: Type[T]) -> T:
        """
        Resolve a registered dependency

        Raises:
            ValueError: If nothing is registered for key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise ValueError(f"No registration for {key.__name__}")

    def get_optional(self, key: Type[T]) -> Optional[T]:
        try:
            return self.get(key)
        except ValueError:
            return None
