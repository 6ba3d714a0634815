# -*- coding: utf-8 -*-
"""
Stepflow Application Core Module
"""

from .config import Config

__all__ = ["Config"]
