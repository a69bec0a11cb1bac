#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Recognizing "not found" errors from rclone's log output.

Some rclone backends report a missing path with a generic exit code and only say so
in their error message. This is consulted only after the exit code check fails.
"""

import re

MISSING_PATTERN = re.compile(r"\b(directory|object|file) not found\b", re.IGNORECASE)

def reports_missing(output: str) -> bool:
    return MISSING_PATTERN.search(output) is not None
