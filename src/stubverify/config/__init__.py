#
# config/__init__.py
#
"""
Configuration handling sub-package for stubverify.

Exports the loading function and core configuration models.
"""

from .loader import load_config
from .models import GlobalConfig, StubVerifyConfig

__all__ = [
    "GlobalConfig",
    "StubVerifyConfig",
    "load_config",
]

# 🔼⚙️
