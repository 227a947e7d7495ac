"""
CLI module for Agent Tools.

Provides the ``agt`` command-line interface using Click.
"""

from agent_tools.cli.main import cli, main

__all__ = ["main", "cli"]
