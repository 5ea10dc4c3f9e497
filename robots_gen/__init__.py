# robots_gen/__init__.py
"""
RobotsGen package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point
from robots_gen.cli import cli as main_cli
from .cli import cli  # re-exported for tests
