#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Helpers for driving the remote the way git-annex does, without git-annex.
"""

from collections import deque
from collections.abc import Iterable
from typing import Optional

from rclone_annex.datatypes.common import AnnexKey
from rclone_annex.protocol.loop import run_remote
from rclone_annex.transfer.base import TransferOutcome, TransferTool
from rclone_annex.transfer.memory import MemoryTransferTool

QUERIES = ("GETCONFIG", "SETCONFIG", "DIRHASH", "DIRHASH-LOWER")

class FakeAnnex:
    """
    Plays the git-annex side of the protocol.

    It is passed to the remote as both its input and its output stream. Requests queued
    with `send` are fed to the remote one line at a time, and questions the remote asks
    (GETCONFIG, DIRHASH, ...) are answered before the next request, just as git-annex does.
    """

    def __init__(self, config: Optional[dict[str, str]] = None, dirhash: str = "ab"):
        self.config: dict[str, str] = dict(config or {})
        self.dirhash = dirhash
        self.requests: deque[str] = deque()
        self.replies: deque[str] = deque()
        self.transcript: list[str] = []
        self._partial = ""

    def send(self, *lines: str) -> None:
        self.requests.extend(lines)

    @property
    def responses(self) -> list[str]:
        """Everything the remote said, except the version banner and its questions."""
        return [line for line in self.transcript if not line.startswith(QUERIES) and not line.startswith("VERSION")]

    def readline(self) -> str:
        if self.replies:
            return self.replies.popleft() + "\n"
        if self.requests:
            return self.requests.popleft() + "\n"
        return ""

    def write(self, text: str) -> int:
        self._partial += text
        *lines, self._partial = self._partial.split("\n")
        for line in lines:
            self.transcript.append(line)
            self.answer(line)
        return len(text)

    def flush(self) -> None:
        pass

    def answer(self, line: str) -> None:
        verb, _, rest = line.partition(" ")
        match verb:
            case "GETCONFIG":
                self.replies.append(f"VALUE {self.config.get(rest, '')}")
            case "SETCONFIG":
                name, _, value = rest.partition(" ")
                self.config[name] = value
            case "DIRHASH":
                self.replies.append(f"VALUE {self.dirhash}")
            case "DIRHASH-LOWER":
                self.replies.append(f"VALUE {self.dirhash.lower()}")

class FixedHashes:
    """Answers hash questions with a fixed value, standing in for AnnexClient."""

    def __init__(self, dirhash: str = "ab"):
        self.value = dirhash
        self.asked: list[tuple[str, AnnexKey]] = []

    def dirhash(self, key: AnnexKey) -> str:
        self.asked.append(("DIRHASH", key))
        return self.value

    def dirhash_lower(self, key: AnnexKey) -> str:
        self.asked.append(("DIRHASH-LOWER", key))
        return self.value.lower()

class StubTransferTool(TransferTool):
    """Returns the same canned outcome for every call, and records the calls."""

    def __init__(self, outcome: TransferOutcome):
        self.outcome = outcome
        self.calls: list[tuple[str, ...]] = []

    def mkdir(self, destination: str) -> TransferOutcome:
        self.calls.append(("mkdir", destination))
        return self.outcome

    def copy(self, source: str, destination: str) -> TransferOutcome:
        self.calls.append(("copy", source, destination))
        return self.outcome

    def delete(self, destination: str, retries: int = 1) -> TransferOutcome:
        self.calls.append(("delete", destination, str(retries)))
        return self.outcome

    def size(self, destination: str) -> TransferOutcome:
        self.calls.append(("size", destination))
        return self.outcome

def run_session(
        requests: Iterable[str],
        *,
        config: Optional[dict[str, str]] = None,
        tool: Optional[TransferTool] = None,
        annex: Optional[FakeAnnex] = None,
) -> FakeAnnex:
    """
    Run the remote against a fake git-annex until the requests run out.

    Returns the FakeAnnex so the test can inspect the responses and persisted config.
    """
    if annex is None:
        annex = FakeAnnex(config)
    if tool is None:
        tool = MemoryTransferTool()
    annex.send(*requests)
    run_remote(annex, annex, tool)
    return annex

__all__ = ['FakeAnnex', 'FixedHashes', 'StubTransferTool', 'run_session']
