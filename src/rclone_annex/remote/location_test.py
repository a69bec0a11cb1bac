#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest

from rclone_annex.datatypes.config import LayoutStrategy, RemoteConfig
from rclone_annex.remote.location import object_path, resolve
from rclone_annex.test_util import FixedHashes

@pytest.mark.parametrize("layout,expected,query", [
    (LayoutStrategy.LOWER, "remote:git-annex/ab", "DIRHASH-LOWER"),
    (LayoutStrategy.DIRECTORY, "remote:git-annex/abk1/", "DIRHASH-LOWER"),
    (LayoutStrategy.NODIR, "remote:git-annex/", None),
    (LayoutStrategy.MIXED, "remote:git-annex/ab", "DIRHASH"),
    (LayoutStrategy.FRANKENCASE, "remote:git-annex/ab", "DIRHASH"),
])
def test_layouts(layout, expected, query):
    hashes = FixedHashes("ab")
    config = RemoteConfig(target="remote", prefix="git-annex", layout=layout)
    assert resolve("k1", config, hashes) == expected
    assert hashes.asked == ([(query, "k1")] if query else [])

def test_case_handling():
    hashes = FixedHashes("Xy/Zw/")
    assert resolve("k1", RemoteConfig(target="r", layout="mixed"), hashes) == "r:git-annex/Xy/Zw/"
    assert resolve("k1", RemoteConfig(target="r", layout="frankencase"), hashes) == "r:git-annex/xy/zw/"
    assert resolve("k1", RemoteConfig(target="r", layout="lower"), hashes) == "r:git-annex/xy/zw/"

def test_empty_hash_means_no_sharding():
    config = RemoteConfig(target="remote", layout=LayoutStrategy.LOWER)
    assert resolve("k1", config, FixedHashes("")) == "remote:git-annex/"

def test_object_path_appends_key():
    hashes = FixedHashes("f87/4d5/")
    assert object_path("SHA256E-s5--abc.txt", RemoteConfig(target="remote"), hashes) == "remote:git-annex/f87/4d5/SHA256E-s5--abc.txt"
    directory = RemoteConfig(target="remote", layout="directory")
    assert object_path("k1", directory, hashes) == "remote:git-annex/f87/4d5/k1/k1"

def test_resolve_is_deterministic(remote_config, hashes):
    assert resolve("k1", remote_config, hashes) == resolve("k1", remote_config, hashes)
