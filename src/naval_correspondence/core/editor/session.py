"""Snapshot-based undo/redo and optimistic concurrency for one editing session."""

from collections.abc import Callable
from typing import Any

from loguru import logger

from naval_correspondence.errors import StaleEditError
from naval_correspondence.models.paragraph import Document, Removal

Operation = Callable[..., Any]


class EditSession:
    """Owns the current document of one editor.

    Documents are immutable, so each history entry is just the previous value.
    ``version`` increases on every applied change, undo and redo; a caller that
    passes an outdated ``expected_version`` gets StaleEditError and nothing changes.
    """

    def __init__(self, document: Document, *, history_limit: int = 100) -> None:
        self.document = document
        self.version = 0
        self.history_limit = history_limit
        self._undo: list[Document] = []
        self._redo: list[Document] = []

    def _check_version(self, expected_version: int | None) -> None:
        if expected_version is not None and expected_version != self.version:
            raise StaleEditError(expected_version, self.version)

    def _commit(self, document: Document) -> None:
        if document == self.document:
            return
        self._undo.append(self.document)
        if len(self._undo) > self.history_limit:
            del self._undo[0]
        self._redo.clear()
        self.document = document
        self.version += 1

    def apply(
        self,
        operation: Operation,
        *args: Any,
        expected_version: int | None = None,
        **kwargs: Any,
    ) -> Any:
        """Run ``operation(document, *args, **kwargs)`` and keep its document.

        Returns whatever the operation returned, so ``insert_after`` still hands
        back the new paragraph and ``remove`` its Removal. Exceptions propagate
        and leave the session untouched.
        """
        self._check_version(expected_version)
        result = operation(self.document, *args, **kwargs)
        if isinstance(result, Document):
            self._commit(result)
        elif isinstance(result, Removal):
            self._commit(result.document)
        elif isinstance(result, tuple) and result and isinstance(result[0], Document):
            self._commit(result[0])
        else:
            msg = f"{operation!r} did not return a Document"
            raise TypeError(msg)
        return result

    def accept(self, document: Document, *, expected_version: int | None = None) -> None:
        """Keep a document computed outside the session, e.g. a confirmed Removal."""
        self._check_version(expected_version)
        self._commit(document)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self, *, expected_version: int | None = None) -> bool:
        self._check_version(expected_version)
        if not self._undo:
            return False
        self._redo.append(self.document)
        self.document = self._undo.pop()
        self.version += 1
        logger.debug("Undo -> version {}", self.version)
        return True

    def redo(self, *, expected_version: int | None = None) -> bool:
        self._check_version(expected_version)
        if not self._redo:
            return False
        self._undo.append(self.document)
        self.document = self._redo.pop()
        self.version += 1
        logger.debug("Redo -> version {}", self.version)
        return True
