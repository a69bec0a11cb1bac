#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The tools that move content between git-annex and the storage backend.

The only real tool is rclone, which is driven as a black box through its
`mkdir`, `copyto`, `delete` and `size` subcommands. MemoryTransferTool mimics
rclone in memory for tests.
"""

from .base import NOT_FOUND_EXIT_CODES, SizeReport, TransferOutcome, TransferTool
from .memory import MemoryTransferTool
from .rclone import Rclone

__all__ = ['NOT_FOUND_EXIT_CODES', 'SizeReport', 'TransferOutcome', 'TransferTool', 'MemoryTransferTool', 'Rclone']
