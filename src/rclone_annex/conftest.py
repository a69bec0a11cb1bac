#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
This module contains pytest fixtures shared by the tests beside each module.
"""

import contextlib

import pytest

from rclone_annex.datatypes.config import LayoutStrategy, RemoteConfig
from rclone_annex.logger import DEBUG, logger
from rclone_annex.test_util import FixedHashes
from rclone_annex.transfer.memory import MemoryTransferTool

@pytest.fixture(autouse=True)
def verbose_logging():
    """Log everything to stderr, so pytest shows it for failing tests."""
    previous = logger.log_level
    logger.log_level = DEBUG
    yield
    logger.log_level = previous

@pytest.fixture
def temp_dir(tmp_path):
    with contextlib.chdir(tmp_path):
        yield

@pytest.fixture
def memory_tool() -> MemoryTransferTool:
    return MemoryTransferTool()

@pytest.fixture
def remote_config() -> RemoteConfig:
    return RemoteConfig(target="remote", prefix="git-annex", layout=LayoutStrategy.LOWER)

@pytest.fixture
def hashes() -> FixedHashes:
    return FixedHashes("ab")
