#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum
from typing_extensions import NewType

AnnexKey = NewType('AnnexKey', str)
"""An opaque git-annex key. It is never parsed or hashed locally."""

class YesNoMaybe(Enum):
    """
    A three-valued logic type used for the result of presence checks.

    MAYBE means the backend could not be asked, not that the key is absent.
    """
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"

__all__ = ['AnnexKey', 'YesNoMaybe']
