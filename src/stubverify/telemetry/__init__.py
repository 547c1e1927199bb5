#
# src/stubverify/telemetry/__init__.py
#
"""
Logging setup for stubverify.
"""
from stubverify.telemetry.logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
