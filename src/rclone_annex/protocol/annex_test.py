#!/usr/bin/env python
# -*- coding: utf-8 -*-

from io import StringIO

import pytest

from rclone_annex.datatypes.errors import AnnexClosedError, ProtocolError
from rclone_annex.protocol.annex import AnnexChannel, AnnexClient

def make_client(replies: str) -> tuple[AnnexClient, StringIO]:
    output = StringIO()
    return AnnexClient(AnnexChannel(StringIO(replies), output)), output

def test_getconfig():
    client, output = make_client("VALUE myremote\r\n")
    assert client.getconfig("target") == "myremote"
    assert output.getvalue() == "GETCONFIG target\n"

def test_setconfig_does_not_wait_for_a_reply():
    client, output = make_client("")
    client.setconfig("prefix", "git-annex")
    assert output.getvalue() == "SETCONFIG prefix git-annex\n"

def test_dirhash_queries():
    client, output = make_client("VALUE f8/4d/\nVALUE f87/4d5/\n")
    assert client.dirhash("k1") == "f8/4d/"
    assert client.dirhash_lower("k1") == "f87/4d5/"
    assert output.getvalue() == "DIRHASH k1\nDIRHASH-LOWER k1\n"

def test_unexpected_reply():
    client, _ = make_client("ERROR confused\n")
    with pytest.raises(ProtocolError, match="expected a VALUE reply"):
        client.getconfig("target")

def test_closed_pipe():
    client, _ = make_client("")
    with pytest.raises(AnnexClosedError):
        client.getconfig("target")

def test_messages_stay_on_one_line():
    output = StringIO()
    AnnexChannel(StringIO(), output).send("TRANSFER-FAILURE", "STORE", "k1", "first line\nsecond line")
    assert output.getvalue() == "TRANSFER-FAILURE STORE k1 first line second line\n"
