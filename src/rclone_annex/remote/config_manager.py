#!/usr/bin/env python
# -*- coding: utf-8 -*-

from rclone_annex.datatypes.config import RemoteConfig
from rclone_annex.datatypes.errors import ConfigurationError
from rclone_annex.logger import logger
from rclone_annex.protocol.annex import AnnexClient
from rclone_annex.transfer.base import TransferTool

SETTINGS = ("prefix", "target", "layout")

class ConfigManager:
    """Reads, validates and persists the settings of the remote."""

    def __init__(self, annex: AnnexClient, tool: TransferTool):
        self.annex = annex
        self.tool = tool

    def read(self) -> RemoteConfig:
        """Fetch the settings from git-annex, filling in defaults. Raises ConfigurationError if invalid."""
        values = {name: self.annex.getconfig(name) for name in SETTINGS}
        return RemoteConfig.from_settings(**values)

    @logger.method("initremote")
    def initremote(self) -> RemoteConfig:
        """
        First-time setup of the remote.

        The settings are persisted with defaults filled in, so later sessions see exactly
        what was used here. Then the root container is created on the backend.
        """
        config = self.read()
        for name, value in config.settings().items():
            self.annex.setconfig(name, value)

        outcome = self.tool.mkdir(config.root)
        if not outcome.succeeded:
            raise ConfigurationError(
                f"Cannot create {config.root} ({outcome.describe()}). "
                f"Check that the rclone remote '{config.target}' exists and its credentials are valid (see 'rclone config')."
            )
        logger.info(f"Initialized rclone remote at {config.root} with layout {config.layout.value}")
        return config

    def prepare(self) -> RemoteConfig:
        """Load the persisted settings at the start of a session. Nothing is written back."""
        config = self.read()
        logger.debug(f"Using {config.root} with layout {config.layout.value}")
        return config
