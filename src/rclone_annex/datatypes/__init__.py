#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .common import AnnexKey, YesNoMaybe
from .config import DEFAULT_PREFIX, LayoutStrategy, RemoteConfig
from .errors import AnnexClosedError, ConfigurationError, NotPreparedError, ProtocolError, RemoteError, TransferError

__all__ = [
    'AnnexKey', 'YesNoMaybe',
    'DEFAULT_PREFIX', 'LayoutStrategy', 'RemoteConfig',
    'AnnexClosedError', 'ConfigurationError', 'NotPreparedError', 'ProtocolError', 'RemoteError', 'TransferError',
]
