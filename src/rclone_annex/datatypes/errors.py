#!/usr/bin/env python
# -*- coding: utf-8 -*-

class RemoteError(Exception):
    """Base class for errors that are reported back to git-annex as a failure response."""

class ConfigurationError(RemoteError):
    """A remote setting is missing or invalid."""

class TransferError(RemoteError):
    """Moving content to or from the remote failed."""

class ProtocolError(RemoteError):
    """git-annex sent something we did not expect."""

class NotPreparedError(RemoteError):
    def __init__(self):
        super().__init__("remote is not prepared; PREPARE must succeed first")

class AnnexClosedError(ProtocolError):
    """git-annex closed the pipe while we were waiting for a reply."""
