#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest

from rclone_annex.protocol.commands import Command, Request, parse_request, parse_value_reply, strip_line_ending

def test_commands_without_arguments():
    assert parse_request("INITREMOTE") == Request(Command.INITREMOTE)
    assert parse_request("PREPARE") == Request(Command.PREPARE)

def test_transfer_keeps_file_name_with_spaces():
    request = parse_request("TRANSFER STORE SHA256E-s5--abc.txt /tmp/my  annex/file name.txt")
    assert request == Request(Command.TRANSFER, ("STORE", "SHA256E-s5--abc.txt", "/tmp/my  annex/file name.txt"))

def test_single_argument_commands():
    assert parse_request("CHECKPRESENT k1") == Request(Command.CHECKPRESENT, ("k1",))
    assert parse_request("REMOVE k1") == Request(Command.REMOVE, ("k1",))
    assert parse_request("ERROR something went wrong") == Request(Command.ERROR, ("something went wrong",))

@pytest.mark.parametrize("line", [
    "FOO",
    "GETCOST",
    "CHECKPRESENT",
    "TRANSFER STORE k1",
    "TRANSFER UPLOAD k1 /tmp/file",
    "checkpresent k1",
    "",
])
def test_unsupported_requests(line):
    assert parse_request(line) is None

def test_line_endings():
    assert strip_line_ending("PREPARE\r\n") == "PREPARE"
    assert strip_line_ending("PREPARE\n") == "PREPARE"
    assert strip_line_ending("TRANSFER STORE k /tmp/trailing space \n") == "TRANSFER STORE k /tmp/trailing space "

def test_value_replies():
    assert parse_value_reply("VALUE remote") == "remote"
    assert parse_value_reply("VALUE ") == ""
    assert parse_value_reply("VALUE") == ""
    assert parse_value_reply("VALUE two words") == "two words"
    assert parse_value_reply("ERROR nope") is None
