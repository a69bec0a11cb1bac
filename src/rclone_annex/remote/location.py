#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Maps a key to the rclone path it is stored under.

The hash directories are never computed here: git-annex is asked for them with
DIRHASH or DIRHASH-LOWER, so the layouts match the ones git-annex uses for its
own directory and rsync special remotes. For the key
`SHA256E-s5--2cf24d.txt` and a lowercase hash of `f87/4d5/`, the layouts give:

    lower        target:prefix/f87/4d5/
    directory    target:prefix/f87/4d5/SHA256E-s5--2cf24d.txt/
    nodir        target:prefix/
    mixed        target:prefix/<DIRHASH>
    frankencase  target:prefix/<DIRHASH, lowercased>

The key itself is then stored as a file inside that location.
"""

from typing_extensions import Protocol

from rclone_annex.datatypes.common import AnnexKey
from rclone_annex.datatypes.config import LayoutStrategy, RemoteConfig

class HashSource(Protocol):
    def dirhash(self, key: AnnexKey) -> str: ...
    def dirhash_lower(self, key: AnnexKey) -> str: ...

def resolve(key: AnnexKey, config: RemoteConfig, hashes: HashSource) -> str:
    """Return the directory a key is stored in. An empty hash answer gives no sharding directory."""
    match config.layout:
        case LayoutStrategy.LOWER:
            return f"{config.root}/{hashes.dirhash_lower(key)}"
        case LayoutStrategy.DIRECTORY:
            return f"{config.root}/{hashes.dirhash_lower(key)}{key}/"
        case LayoutStrategy.NODIR:
            return f"{config.root}/"
        case LayoutStrategy.MIXED:
            return f"{config.root}/{hashes.dirhash(key)}"
        case LayoutStrategy.FRANKENCASE:
            return f"{config.root}/{hashes.dirhash(key).lower()}"
    raise ValueError(f"Unhandled layout {config.layout}")

def object_path(key: AnnexKey, config: RemoteConfig, hashes: HashSource) -> str:
    """Return the full rclone path of the file holding a key."""
    return resolve(key, config, hashes) + key
