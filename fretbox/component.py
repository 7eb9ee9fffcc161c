"""Components that redo their work only when their slice of the config changes.

A component reads a small, comparable slice out of the full configuration
and owns one result computed from it. Configuration edits outside the
slice leave the result untouched; edits inside it recompute the result,
handing the old one over so that state such as a selection can carry on.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar

C = TypeVar("C")
"""Type variable for the root configuration type."""
S = TypeVar("S", bound="ConfigSlice[Any]")
"""Type variable for the slice of the root configuration."""
R = TypeVar("R")
"""Type variable for the owned result."""
K = TypeVar("K", bound="SliceComponent[Any, Any, Any]")
"""Type variable for component types."""


class ConfigSlice(Generic[C], metaclass=ABCMeta):
    """The fields of a root configuration that one component depends on.

    Slices are compared by value, so implementations should be frozen
    dataclasses.
    """

    @classmethod
    @abstractmethod
    def extract(cls: Type[S], root_config: C) -> S:
        """Extract this slice from a root configuration."""
        raise NotImplementedError()


class SliceComponent(Generic[C, S, R], metaclass=ABCMeta):
    """Owns a result computed from one slice of the configuration."""

    @classmethod
    @abstractmethod
    def extract_slice(cls, root_config: C) -> S:
        raise NotImplementedError()

    @classmethod
    def construct(cls: Type[K], root_config: C) -> K:
        """Create the component from a full configuration."""
        return cls(cls.extract_slice(root_config))

    def __init__(self, config: S) -> None:
        self._config = config
        self._result = self.compute(config, None)

    @property
    def config(self) -> S:
        return self._config

    @property
    def result(self) -> R:
        return self._result

    @abstractmethod
    def compute(self, config: S, previous: Optional[R]) -> R:
        """Compute the result for a slice.

        Args:
            config: The slice to compute from.
            previous: The result being replaced, None on construction.

        Returns:
            The new result.
        """
        raise NotImplementedError()

    def handle_config(self, config: C, reset: bool) -> Optional[R]:
        """Handle a configuration update.

        Args:
            config: The new root configuration.
            reset: Whether to recompute even if the slice is unchanged.

        Returns:
            The recomputed result, or None if the slice did not change.
        """
        sub_config = type(self).extract_slice(config)
        if sub_config == self._config and not reset:
            return None
        self._config = sub_config
        self._result = self.compute(sub_config, self._result)
        return self._result
