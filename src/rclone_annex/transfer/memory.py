#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
MemoryTransferTool keeps remote objects in a dict, mimicking rclone's exit codes and
output. It is useful for testing and does not persist anything.
"""

import json
from pathlib import Path
import re

from typing_extensions import override

from .base import TransferOutcome, TransferTool

REMOTE_PATH = re.compile(r"^[\w.-]+:")

UNREACHABLE = TransferOutcome(1, "", "Failed to create file system: didn't find section in config file")

def is_remote(path: str) -> bool:
    return REMOTE_PATH.match(path) is not None

def directory_not_found(path: str) -> TransferOutcome:
    return TransferOutcome(3, "", f"ERROR : {path}: error listing: directory not found")

class MemoryTransferTool(TransferTool):

    def __init__(self, reachable: bool = True):
        self.reachable = reachable
        self.objects: dict[str, bytes] = {}
        self.containers: set[str] = set()
        self.calls: list[tuple[str, ...]] = []

    def children(self, path: str) -> list[str]:
        """Every object stored at path, or below it if path is a directory."""
        directory = path.rstrip("/") + "/"
        return [name for name in self.objects if name == path or name.startswith(directory)]

    @override
    def mkdir(self, destination: str) -> TransferOutcome:
        self.calls.append(("mkdir", destination))
        if not self.reachable:
            return UNREACHABLE
        self.containers.add(destination)
        return TransferOutcome(0)

    @override
    def copy(self, source: str, destination: str) -> TransferOutcome:
        self.calls.append(("copy", source, destination))
        if not self.reachable:
            return UNREACHABLE
        if is_remote(source):
            if source not in self.objects:
                return directory_not_found(source)
            data = self.objects[source]
        elif not Path(source).is_file():
            return TransferOutcome(4, "", f"ERROR : {source}: file not found")
        else:
            data = Path(source).read_bytes()
        if is_remote(destination):
            self.objects[destination] = data
        else:
            Path(destination).parent.mkdir(parents=True, exist_ok=True)
            Path(destination).write_bytes(data)
        return TransferOutcome(0)

    @override
    def delete(self, destination: str, retries: int = 1) -> TransferOutcome:
        self.calls.append(("delete", destination, str(retries)))
        if not self.reachable:
            return UNREACHABLE
        names = self.children(destination)
        if not names:
            return directory_not_found(destination)
        for name in names:
            del self.objects[name]
        return TransferOutcome(0)

    @override
    def size(self, destination: str) -> TransferOutcome:
        self.calls.append(("size", destination))
        if not self.reachable:
            return UNREACHABLE
        names = self.children(destination)
        if not names:
            return directory_not_found(destination)
        report = {"count": len(names), "bytes": sum(len(self.objects[name]) for name in names)}
        return TransferOutcome(0, json.dumps(report))
