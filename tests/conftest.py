# -*- coding: utf-8 -*-
"""
Shared pytest configuration.
"""
import os
import sys
from pathlib import Path

# Headless Qt for signal tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
