"""Command line argument parsing."""

from .options import AgentArgs, Mode
from .parser import ArgumentParser

__all__ = ["AgentArgs", "ArgumentParser", "Mode"]
