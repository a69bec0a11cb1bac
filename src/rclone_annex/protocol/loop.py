#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The request loop of the external special remote protocol.

Every request gets exactly one response, written once the request has been handled
completely. A failing request is answered with its failure response and the loop
carries on; only the end of the input stream stops it.
"""

from typing_extensions import Optional, TextIO

from rclone_annex.datatypes.common import AnnexKey, YesNoMaybe
from rclone_annex.datatypes.errors import AnnexClosedError, NotPreparedError
from rclone_annex.logger import logger
from rclone_annex.remote.config_manager import ConfigManager
from rclone_annex.remote.handlers import RcloneRemote
from rclone_annex.transfer.base import TransferTool

from .annex import AnnexChannel, AnnexClient
from .commands import Command, Direction, Request, parse_request

PROTOCOL_VERSION = "1"

UNSUPPORTED = "UNSUPPORTED-REQUEST"

class ProtocolLoop:

    remote: Optional[RcloneRemote] = None

    def __init__(self, channel: AnnexChannel, tool: TransferTool):
        self.channel = channel
        self.annex = AnnexClient(channel)
        self.tool = tool
        self.config_manager = ConfigManager(self.annex, tool)

    def run(self) -> None:
        self.channel.send("VERSION", PROTOCOL_VERSION)
        while (line := self.channel.receive()) is not None:
            if not line:
                continue
            request = parse_request(line)
            if request is None:
                logger.verbose(f"Unsupported request: {line}")
                self.channel.send(UNSUPPORTED)
                continue
            try:
                self.dispatch(request)
            except AnnexClosedError:
                logger.warning("git-annex closed the connection in the middle of a request")
                return
            except Exception as e:
                logger.error(f"{request.command.verb} failed: {e}")
                self.channel.send(*failure_response(request, str(e)))

    def dispatch(self, request: Request) -> None:
        match request.command:
            case Command.INITREMOTE:
                self.initremote()
            case Command.PREPARE:
                self.prepare()
            case Command.TRANSFER:
                direction, key, file = request.args
                self.transfer(Direction(direction), AnnexKey(key), file)
            case Command.CHECKPRESENT:
                self.checkpresent(AnnexKey(request.args[0]))
            case Command.REMOVE:
                self.remove(AnnexKey(request.args[0]))
            case Command.ERROR:
                # git-annex is about to give up on us; it closes the pipe itself.
                logger.error(f"git-annex reported an error: {request.args[0]}")
            case _:
                self.channel.send(UNSUPPORTED)

    def prepared(self) -> RcloneRemote:
        if self.remote is None:
            raise NotPreparedError()
        return self.remote

    def initremote(self) -> None:
        config = self.config_manager.initremote()
        self.remote = RcloneRemote(config, self.annex, self.tool)
        self.channel.send("INITREMOTE-SUCCESS")

    def prepare(self) -> None:
        config = self.config_manager.prepare()
        self.remote = RcloneRemote(config, self.annex, self.tool)
        self.channel.send("PREPARE-SUCCESS")

    def transfer(self, direction: Direction, key: AnnexKey, file: str) -> None:
        remote = self.prepared()
        if direction is Direction.STORE:
            remote.store(key, file)
        else:
            remote.retrieve(key, file)
        self.channel.send("TRANSFER-SUCCESS", direction.value, key)

    def checkpresent(self, key: AnnexKey) -> None:
        presence = self.prepared().checkpresent(key)
        match presence.state:
            case YesNoMaybe.YES:
                self.channel.send("CHECKPRESENT-SUCCESS", key)
            case YesNoMaybe.NO:
                self.channel.send("CHECKPRESENT-FAILURE", key)
            case YesNoMaybe.MAYBE:
                self.channel.send("CHECKPRESENT-UNKNOWN", key, presence.reason)

    def remove(self, key: AnnexKey) -> None:
        self.prepared().remove(key)
        self.channel.send("REMOVE-SUCCESS", key)

def failure_response(request: Request, message: str) -> list[str]:
    """The words of the failure response for a request that raised an error."""
    match request.command:
        case Command.INITREMOTE:
            return ["INITREMOTE-FAILURE", message]
        case Command.PREPARE:
            return ["PREPARE-FAILURE", message]
        case Command.TRANSFER:
            direction, key, _ = request.args
            return ["TRANSFER-FAILURE", direction, key, message]
        case Command.CHECKPRESENT:
            # An error tells us nothing about whether the key is there.
            return ["CHECKPRESENT-UNKNOWN", request.args[0], message]
        case Command.REMOVE:
            return ["REMOVE-FAILURE", request.args[0], message]
        case _:
            return ["ERROR", message]

def run_remote(input_stream: TextIO, output_stream: TextIO, tool: TransferTool) -> None:
    """Serve one git-annex session until the input stream ends."""
    ProtocolLoop(AnnexChannel(input_stream, output_stream), tool).run()
