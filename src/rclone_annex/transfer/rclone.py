#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Runs rclone as a blocking subprocess.

rclone's stdout and stderr are captured and only ever logged to our stderr,
because our own stdout carries the git-annex protocol. rclone's stdin is a pipe
that is closed immediately, so rclone can never consume protocol messages
(for example by prompting for a config password).
"""

from collections.abc import Iterable

from plumbum import local, CommandNotFound
from typing_extensions import override

from rclone_annex.logger import logger

from .base import TransferOutcome, TransferTool

# Conventional shell exit code for a missing executable.
COMMAND_NOT_FOUND = 127

class Rclone(TransferTool):

    def __init__(self, executable: str = "rclone", extra_flags: Iterable[str] = ()):
        self.executable = executable
        self.extra_flags = list(extra_flags)

    @override
    def mkdir(self, destination: str) -> TransferOutcome:
        return self.run("mkdir", destination)

    @override
    def copy(self, source: str, destination: str) -> TransferOutcome:
        return self.run("copyto", source, destination)

    @override
    def delete(self, destination: str, retries: int = 1) -> TransferOutcome:
        return self.run("delete", "--retries", str(retries), destination)

    @override
    def size(self, destination: str) -> TransferOutcome:
        return self.run("size", "--json", destination)

    def run(self, subcommand: str, *args: str) -> TransferOutcome:
        argv = [subcommand, *self.extra_flags, *args]
        logger.debug(f"running {self.executable} {' '.join(argv)}")
        try:
            rclone = local[self.executable]
            exit_code, stdout, stderr = rclone.run(argv, retcode=None)
        except (CommandNotFound, OSError) as e:
            logger.error(f"Could not run {self.executable}: {e}")
            return TransferOutcome(COMMAND_NOT_FOUND, "", f"{self.executable}: {e}")
        if stdout:
            logger.debug(f"rclone stdout: {stdout.rstrip()}")
        if stderr:
            logger.debug(f"rclone stderr: {stderr.rstrip()}")
        logger.debug(f"rclone {subcommand} exited with {exit_code}")
        return TransferOutcome(exit_code, stdout, stderr)
