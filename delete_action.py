#!/usr/bin/env python3
"""
Delete action for the ranked file table

A two-state machine (IDLE, CONFIRMING) that owns the ranked list. A delete
request only records what is about to be removed; the file is touched
once the request is confirmed. Nothing here knows about the terminal, so
the whole flow can be driven from tests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from file_operations import FileOperations
from file_ranker import DisplayRow, build_display_rows
from file_scanner import FileEntry


class DeleteState(Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"


class DeleteOutcome(Enum):
    DELETED = "deleted"
    DECLINED = "declined"
    FAILED = "failed"
    NOTHING_PENDING = "nothing_pending"


@dataclass(frozen=True)
class PendingConfirmation:
    """A delete waiting for a yes/no answer"""

    position: int
    filename: str
    path: str

    @property
    def prompt(self) -> str:
        return f"Are you sure you want to delete {self.filename}? (y/n)"


@dataclass(frozen=True)
class DeleteResult:
    outcome: DeleteOutcome
    pending: Optional[PendingConfirmation] = None
    error_message: Optional[str] = None

    @property
    def deleted(self) -> bool:
        return self.outcome is DeleteOutcome.DELETED


class DeleteController:
    """Holds the ranked list and applies confirmed deletions to it"""

    def __init__(self, ranked: list[FileEntry], file_operations: Optional[FileOperations] = None):
        self.entries: list[FileEntry] = list(ranked)
        self.file_operations = file_operations or FileOperations()
        self.state = DeleteState.IDLE
        self.pending: Optional[PendingConfirmation] = None

    @property
    def rows(self) -> list[DisplayRow]:
        return build_display_rows(self.entries)

    @property
    def confirming(self) -> bool:
        return self.state is DeleteState.CONFIRMING

    def request_delete(self, row: Optional[DisplayRow]) -> Optional[PendingConfirmation]:
        """Start confirming the deletion of row

        Returns None without changing state when there is no selected row
        or a confirmation is already in progress.
        """
        if row is None or self.confirming:
            return None
        if not 0 <= row.position < len(self.entries):
            return None

        self.pending = PendingConfirmation(position=row.position, filename=row.filename, path=row.path)
        self.state = DeleteState.CONFIRMING
        return self.pending

    def confirm(self, yes: bool) -> DeleteResult:
        """Answer the pending confirmation and return to IDLE"""
        pending = self.pending
        if not self.confirming or pending is None:
            return DeleteResult(outcome=DeleteOutcome.NOTHING_PENDING)

        self.pending = None
        self.state = DeleteState.IDLE

        if not yes:
            return DeleteResult(outcome=DeleteOutcome.DECLINED, pending=pending)

        result = self.file_operations.delete_file(pending.path)
        if not result.success:
            return DeleteResult(outcome=DeleteOutcome.FAILED, pending=pending, error_message=result.error_message)

        del self.entries[pending.position]
        return DeleteResult(outcome=DeleteOutcome.DELETED, pending=pending)
