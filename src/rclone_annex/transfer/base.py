#!/usr/bin/env python
# -*- coding: utf-8 -*-

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel

# rclone exits with 3 when a directory is not found and 4 when a file is not found.
NOT_FOUND_EXIT_CODES = frozenset({3, 4})

@dataclass(frozen=True)
class TransferOutcome:
    """The raw result of one run of the transfer tool. Interpreting it is up to the caller."""
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def not_found(self) -> bool:
        return self.exit_code in NOT_FOUND_EXIT_CODES

    @property
    def output(self) -> str:
        return "\n".join(text for text in (self.stdout, self.stderr) if text)

    def describe(self) -> str:
        """A one-line summary suitable for a failure message."""
        lines = [line.strip() for line in self.output.splitlines() if line.strip()]
        if lines:
            return f"exit code {self.exit_code}: {lines[-1]}"
        return f"exit code {self.exit_code}"

class SizeReport(BaseModel):
    """The JSON document printed by a size query, e.g. `{"count":1,"bytes":5}`."""
    count: int
    bytes: int = 0

class TransferTool(ABC):
    """
    The external program that moves data to and from the storage backend.

    Paths are given in the tool's own syntax: remote paths look like `target:prefix/path`
    and local paths are ordinary file system paths.
    """

    @abstractmethod
    def mkdir(self, destination: str) -> TransferOutcome:
        """Create a container on the remote, succeeding if it already exists."""

    @abstractmethod
    def copy(self, source: str, destination: str) -> TransferOutcome:
        """Copy a single file. The destination is the full path of the new file."""

    @abstractmethod
    def delete(self, destination: str, retries: int = 1) -> TransferOutcome:
        """Delete a file, or every file under a directory."""

    @abstractmethod
    def size(self, destination: str) -> TransferOutcome:
        """Count the objects at a path. stdout holds a SizeReport as JSON."""
