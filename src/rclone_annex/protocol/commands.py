#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The requests git-annex sends to a special remote, and how to split them into arguments.

Arguments are separated by single spaces. The last argument of a request runs to the
end of the line, so a file name containing spaces arrives intact:

    TRANSFER STORE SHA256E-s5--2cf24d.txt /home/user/my annex/.git/annex/tmp/file
"""

from dataclasses import dataclass
from enum import Enum
from typing_extensions import Optional

class Command(Enum):
    """Every request this remote understands, with the number of arguments it takes."""
    INITREMOTE = ("INITREMOTE", 0)
    PREPARE = ("PREPARE", 0)
    TRANSFER = ("TRANSFER", 3)
    CHECKPRESENT = ("CHECKPRESENT", 1)
    REMOVE = ("REMOVE", 1)
    ERROR = ("ERROR", 1)

    def __init__(self, verb: str, arity: int):
        self.verb = verb
        self.arity = arity

    @classmethod
    def from_verb(cls, verb: str) -> Optional['Command']:
        for command in cls:
            if command.verb == verb:
                return command
        return None

class Direction(Enum):
    STORE = "STORE"
    RETRIEVE = "RETRIEVE"

@dataclass(frozen=True)
class Request:
    command: Command
    args: tuple[str, ...] = ()

def strip_line_ending(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")

def parse_request(line: str) -> Optional[Request]:
    """
    Split a request line into its command and arguments.

    Returns None if the verb is unknown or the request has the wrong number of arguments.
    """
    verb, _, rest = line.partition(" ")
    command = Command.from_verb(verb)
    if command is None:
        return None
    if command.arity == 0:
        return Request(command)
    if not rest:
        return None
    args = tuple(rest.split(" ", command.arity - 1))
    if len(args) != command.arity:
        return None
    if command is Command.TRANSFER and args[0] not in Direction.__members__:
        return None
    return Request(command, args)

def parse_value_reply(line: str) -> Optional[str]:
    """Return the value of a `VALUE <value>` reply, or None if the line is some other message."""
    verb, _, value = line.partition(" ")
    if verb != "VALUE":
        return None
    return value
