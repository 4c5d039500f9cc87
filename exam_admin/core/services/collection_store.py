"""Local mirrors of the two remote collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from exam_admin.core.models import ExamResponse, Question

T = TypeVar("T")


class CollectionStore(Generic[T]):
    """Last-known copy of a remote collection plus its loading flag."""

    def __init__(self) -> None:
        self._items: tuple[T, ...] = ()
        self._loading: bool = False

    def get_items(self) -> tuple[T, ...]:
        return self._items

    def replace(self, items: Sequence[T]) -> None:
        self._items = tuple(items)

    def is_loading(self) -> bool:
        return self._loading

    def begin_loading(self) -> bool:
        """Set the loading flag. Returns False if a load is already running."""
        if self._loading:
            return False
        self._loading = True
        return True

    def finish_loading(self) -> None:
        self._loading = False


class QuestionStore(CollectionStore[Question]):
    pass


class ResponseStore(CollectionStore[ExamResponse]):
    pass
