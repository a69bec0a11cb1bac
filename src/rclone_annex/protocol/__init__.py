#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The git-annex external special remote protocol, version 1.

git-annex starts the remote as a subprocess and talks to it over stdin and stdout,
one message per line. See https://git-annex.branchable.com/design/external_special_remote_protocol/
"""

from .annex import AnnexChannel, AnnexClient
from .commands import Command, Direction, Request, parse_request

__all__ = ['AnnexChannel', 'AnnexClient', 'Command', 'Direction', 'Request', 'parse_request']
