#!/usr/bin/env python
# -*- coding: utf-8 -*-

import shlex
import sys
from typing_extensions import Literal

from plumbum import cli

from rclone_annex.logger import LEVELS, logger
from rclone_annex.protocol.loop import run_remote
from rclone_annex.transfer.rclone import Rclone

class Env:
    RCLONE = "RCLONE_ANNEX_RCLONE"
    RCLONE_FLAGS = "RCLONE_ANNEX_RCLONE_FLAGS"
    LOG_LEVEL = "RCLONE_ANNEX_LOG_LEVEL"

class Application(cli.Application):
    """
    A git-annex external special remote that stores content anywhere rclone can reach.

    git-annex runs this program itself and drives it over stdin and stdout; it is not
    meant to be run by hand. The switches exist for troubleshooting, and each one can
    also be set through an environment variable.
    """
    PROGNAME = "git-annex-remote-rclone2"
    VERSION = "0.1.0"

    rclone = cli.SwitchAttr("--rclone", str, envname=Env.RCLONE, default="rclone",
                            help = "The rclone executable to run.")

    rclone_flags = cli.SwitchAttr("--rclone-flags", str, envname=Env.RCLONE_FLAGS, default="",
                                  help = "Extra flags passed to every rclone invocation, e.g. '--config /path/rclone.conf'.")

    log_level = cli.SwitchAttr("--log-level", cli.Set(*LEVELS, case_sensitive=False), envname=Env.LOG_LEVEL, default="info",
                               help = "How much to log to stderr.")

    def main(self, *args) -> Literal[0, 1]:
        if args:
            logger.error(f"Unexpected positional arguments: {' '.join(args)}")
            return 1
        logger.set_level(self.log_level)

        # Keys and file names are passed through byte for byte, even if they are not valid UTF-8.
        sys.stdin.reconfigure(encoding="utf-8", errors="surrogateescape", newline="\n")
        sys.stdout.reconfigure(encoding="utf-8", errors="surrogateescape", newline="\n")

        tool = Rclone(self.rclone, shlex.split(self.rclone_flags))
        run_remote(sys.stdin, sys.stdout, tool)
        return 0
