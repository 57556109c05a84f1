"""CLI commands for home-strength."""

from .catalog import catalog
from .generate import generate, kid
from .init import init
from .log import log, log_class
from .routines import routines
from .stats import stats

__all__ = [
    "catalog",
    "generate",
    "init",
    "kid",
    "log",
    "log_class",
    "routines",
    "stats",
]
