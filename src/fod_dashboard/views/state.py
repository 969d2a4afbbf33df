from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Phase(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewState(Generic[T]):
    phase: Phase
    data: T | None = None
    reason: str | None = None

    @classmethod
    def loading(cls) -> ViewState[T]:
        return cls(Phase.LOADING)

    @classmethod
    def loaded(cls, data: T) -> ViewState[T]:
        return cls(Phase.LOADED, data=data)

    @classmethod
    def not_found(cls) -> ViewState[T]:
        return cls(Phase.NOT_FOUND)

    @classmethod
    def failed(cls, reason: str) -> ViewState[T]:
        return cls(Phase.FAILED, reason=reason)


@dataclass
class RequestHandle:
    request_id: int
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class ViewController(Generic[T]):
    """
    Holds one view's state and the handle of its in-flight request.

    A result is applied only when it arrives on the current, uncancelled handle
    of a mounted view; anything else is dropped.
    """

    def __init__(self) -> None:
        self.state: ViewState[T] = ViewState.loading()
        self.mounted = False
        self._current: RequestHandle | None = None
        self._ids = itertools.count(1)

    def begin(self) -> RequestHandle:
        if self._current is not None:
            self._current.cancel()
        self.mounted = True
        self._current = RequestHandle(request_id=next(self._ids))
        self.state = ViewState.loading()
        return self._current

    def deliver(self, handle: RequestHandle, state: ViewState[T]) -> bool:
        if handle.cancelled or handle is not self._current or not self.mounted:
            logger.debug("Dropping stale result for request %s (%s)", handle.request_id, state.phase)
            return False
        self.state = state
        self._current = None
        return True

    def unmount(self) -> None:
        self.mounted = False
        if self._current is not None:
            self._current.cancel()
            self._current = None
