#!/usr/bin/env python3
"""
File Operations Module for Megethos

Removes single files on behalf of the interactive table. Failures are
returned as OperationResult values instead of being raised, so a failed
delete never ends the session.
"""

import pathlib
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OperationType(Enum):
    """Type of file operation"""

    DELETE = "delete"


@dataclass
class FileOperation:
    """Represents a planned file operation"""

    target_path: pathlib.Path
    operation_type: OperationType = OperationType.DELETE
    identifier: str = ""  # Optional identifier for status messages

    def __post_init__(self):
        if not self.identifier:
            self.identifier = self.target_path.name


@dataclass
class OperationResult:
    """Result of a file operation"""

    operation: FileOperation
    success: bool
    error_message: Optional[str] = None


class FileOperations:
    """Single-file delete handler"""

    def execute_operation(self, operation: FileOperation) -> OperationResult:
        """Execute a single file operation"""
        try:
            path = operation.target_path
            # Links are removed themselves, never their target
            if path.is_dir() and not path.is_symlink():
                raise IsADirectoryError(f"Is a directory: '{path}'")
            path.unlink()
            return OperationResult(operation=operation, success=True)

        except OSError as e:
            return OperationResult(operation=operation, success=False, error_message=str(e))

    def plan_operation(self, target_path: pathlib.Path, identifier: str = "") -> FileOperation:
        """Create a planned delete operation"""
        return FileOperation(
            target_path=target_path,
            operation_type=OperationType.DELETE,
            identifier=identifier or target_path.name,
        )

    def delete_file(self, path: str) -> OperationResult:
        """Delete one file, reporting failure instead of raising"""
        operation = self.plan_operation(pathlib.Path(path))
        return self.execute_operation(operation)
