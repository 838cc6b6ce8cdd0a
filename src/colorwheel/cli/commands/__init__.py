"""CLI commands for colorwheel."""

from .color import decode, encode, pick
from .config import config
from .run import run

__all__ = ["config", "decode", "encode", "pick", "run"]
