#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The connection to git-annex.

AnnexChannel owns the pipe. AnnexClient asks git-annex questions over it while a request
is being handled; git-annex answers each question before it sends the next request, so
a question is just a blocking call.
"""

from typing_extensions import Optional, TextIO

from rclone_annex.datatypes.common import AnnexKey
from rclone_annex.datatypes.errors import AnnexClosedError, ProtocolError
from rclone_annex.logger import logger

from .commands import parse_value_reply, strip_line_ending

class AnnexChannel:
    """The line-oriented pipe shared with git-annex. Nothing else may write to output."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO):
        self.input_stream = input_stream
        self.output_stream = output_stream

    def send(self, *words: str) -> None:
        line = " ".join(word for word in words if word is not None)
        # A stray newline would be read as a second message.
        line = line.replace("\r", " ").replace("\n", " ")
        logger.debug(f"-> {line}")
        self.output_stream.write(line + "\n")
        self.output_stream.flush()

    def receive(self) -> Optional[str]:
        """Read the next line, or return None at end of stream."""
        line = self.input_stream.readline()
        if not line:
            return None
        line = strip_line_ending(line)
        logger.debug(f"<- {line}")
        return line

class AnnexClient:
    """Questions a special remote may ask git-annex in the middle of a request."""

    def __init__(self, channel: AnnexChannel):
        self.channel = channel

    def getconfig(self, name: str) -> str:
        """Get a setting of this remote. Unset settings are returned as an empty string."""
        self.channel.send("GETCONFIG", name)
        return self._read_value()

    def setconfig(self, name: str, value: str) -> None:
        """Persist a setting of this remote. git-annex does not reply."""
        self.channel.send("SETCONFIG", name, value)

    def dirhash(self, key: AnnexKey) -> str:
        """The mixed-case hash directory git-annex would use for the key, like `f8/4d/`."""
        self.channel.send("DIRHASH", key)
        return self._read_value()

    def dirhash_lower(self, key: AnnexKey) -> str:
        """The lowercase hash directory git-annex would use for the key, like `f87/4d5/`."""
        self.channel.send("DIRHASH-LOWER", key)
        return self._read_value()

    def _read_value(self) -> str:
        line = self.channel.receive()
        if line is None:
            raise AnnexClosedError("git-annex closed the connection while we waited for a reply")
        value = parse_value_reply(line)
        if value is None:
            raise ProtocolError(f"expected a VALUE reply, got '{line}'")
        return value
