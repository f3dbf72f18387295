"""
Behave environment configuration

Puts the project root on the import path and resets per-scenario state.
"""

import os
import sys

# Add project root to Python path so we can import tagtree
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def before_scenario(context, scenario):
    """Run before each scenario"""
    for name in ("registry", "bag", "error"):
        if hasattr(context, name):
            delattr(context, name)
