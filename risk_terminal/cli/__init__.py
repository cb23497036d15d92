"""
CLI module for command-line interface.

This module provides a command-line interface for the risk
calculators.
"""

from .main import app

__all__ = ["app"]
