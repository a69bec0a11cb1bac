#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .config_manager import ConfigManager
from .handlers import Presence, RcloneRemote
from .location import object_path, resolve

__all__ = ['ConfigManager', 'Presence', 'RcloneRemote', 'object_path', 'resolve']
