#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The data operations of the remote, and how rclone's results are turned into verdicts.

CHECKPRESENT is deliberately three-valued. A key is only reported absent when rclone
positively says so; anything else (a network error, a missing rclone config, output
we cannot parse) is reported as unknown so git-annex never drops its last copy of a
key because a backend was unreachable.
"""

from pathlib import Path
import shutil
import tempfile

from pydantic import ValidationError
from typing_extensions import NamedTuple

from rclone_annex.datatypes.common import AnnexKey, YesNoMaybe
from rclone_annex.datatypes.config import RemoteConfig
from rclone_annex.datatypes.errors import RemoteError, TransferError
from rclone_annex.logger import logger
from rclone_annex.protocol.annex import AnnexClient
from rclone_annex.transfer.base import SizeReport, TransferTool

from . import legacy
from .location import object_path

class Presence(NamedTuple):
    state: YesNoMaybe
    reason: str = ""

class RcloneRemote:
    """A prepared remote. The config is fixed for the lifetime of the object."""

    def __init__(self, config: RemoteConfig, annex: AnnexClient, tool: TransferTool):
        self.config = config
        self.annex = annex
        self.tool = tool

    def object_path(self, key: AnnexKey) -> str:
        return object_path(key, self.config, self.annex)

    @logger.method("store {key}")
    def store(self, key: AnnexKey, file: str) -> None:
        source = Path(file)
        if not source.is_file():
            raise TransferError(f"Cannot store {key}: source file {file} does not exist")
        outcome = self.tool.copy(str(source), self.object_path(key))
        if not outcome.succeeded:
            raise TransferError(f"rclone copyto failed with {outcome.describe()}")

    @logger.method("retrieve {key}")
    def retrieve(self, key: AnnexKey, file: str) -> None:
        """
        Download into a fresh temporary directory first, then move the file into place,
        so a failed download never leaves a partial file at the destination.
        """
        temp_dir = Path(tempfile.mkdtemp(prefix="rclone-annex-"))
        try:
            downloaded = temp_dir / key
            outcome = self.tool.copy(self.object_path(key), str(downloaded))
            if not outcome.succeeded:
                raise TransferError(f"rclone copyto failed with {outcome.describe()}")
            try:
                shutil.move(downloaded, file)
            except OSError as e:
                raise TransferError(f"Cannot move {downloaded} to {file}: {e}") from e
        except TransferError:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise
        try:
            temp_dir.rmdir()
        except OSError as e:
            raise TransferError(f"Cannot remove temporary directory {temp_dir}: {e}") from e

    @logger.method("checkpresent {key}")
    def checkpresent(self, key: AnnexKey) -> Presence:
        outcome = self.tool.size(self.object_path(key))
        if outcome.not_found:
            return Presence(YesNoMaybe.NO)
        if not outcome.succeeded:
            return Presence(YesNoMaybe.MAYBE, f"rclone size failed with {outcome.describe()}")
        try:
            report = SizeReport.model_validate_json(outcome.stdout)
        except ValidationError:
            return Presence(YesNoMaybe.MAYBE, f"cannot parse rclone size output: {outcome.stdout.strip()!r}")
        if report.count >= 1:
            return Presence(YesNoMaybe.YES)
        # An empty container exists, but the key is not in it.
        return Presence(YesNoMaybe.NO)

    @logger.method("remove {key}")
    def remove(self, key: AnnexKey) -> None:
        """Remove a key. Removing a key that is already gone succeeds."""
        outcome = self.tool.delete(self.object_path(key), retries=1)
        if outcome.succeeded or outcome.not_found:
            return
        if legacy.reports_missing(outcome.output):
            logger.verbose(f"{key} is already absent from the remote")
            return
        raise RemoteError(f"rclone delete failed with {outcome.describe()}")
