#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
from pydantic import ValidationError

from rclone_annex.datatypes.config import DEFAULT_PREFIX, LayoutStrategy, RemoteConfig
from rclone_annex.datatypes.errors import ConfigurationError

def test_defaults_are_filled_in():
    config = RemoteConfig.from_settings(target="remote", prefix="", layout="")
    assert config.prefix == DEFAULT_PREFIX
    assert config.layout is LayoutStrategy.LOWER
    assert config.root == "remote:git-annex"

@pytest.mark.parametrize("name,layout", [
    ("lower", LayoutStrategy.LOWER),
    ("directory", LayoutStrategy.DIRECTORY),
    ("nodir", LayoutStrategy.NODIR),
    ("mixed", LayoutStrategy.MIXED),
    ("Frankencase", LayoutStrategy.FRANKENCASE),
])
def test_layout_names(name, layout):
    config = RemoteConfig.from_settings(target="remote", prefix="p", layout=name)
    assert config.layout is layout

def test_invalid_layout_is_rejected():
    with pytest.raises(ConfigurationError, match="invalid layout 'sideways'"):
        RemoteConfig.from_settings(target="remote", prefix="", layout="sideways")

def test_root_prefix_is_rejected():
    with pytest.raises(ConfigurationError, match="root directory"):
        RemoteConfig.from_settings(target="remote", prefix="/", layout="")

def test_target_is_required():
    with pytest.raises(ConfigurationError, match="target setting is required"):
        RemoteConfig.from_settings(target="", prefix="", layout="")

def test_all_problems_are_reported():
    with pytest.raises(ConfigurationError) as excinfo:
        RemoteConfig.from_settings(target="", prefix="/", layout="sideways")
    message = str(excinfo.value)
    assert "target" in message
    assert "root directory" in message
    assert "sideways" in message

def test_settings_round_trip_through_persisted_strings():
    config = RemoteConfig.from_settings(target="s3", prefix="annex/photos", layout="mixed")
    assert config.settings() == {"prefix": "annex/photos", "target": "s3", "layout": "mixed"}
    assert RemoteConfig.from_settings(**config.settings()) == config

def test_config_is_immutable(remote_config: RemoteConfig):
    with pytest.raises(ValidationError):
        remote_config.prefix = "elsewhere"
