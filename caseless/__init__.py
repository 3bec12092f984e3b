from . import logging
from .exception import UnsupportedKeyKind
from .headers import HttpHeaders
from .mapping import CaselessDict, FieldDescriptor, wrap
from .registry import NameRegistry

__all__ = [
    "CaselessDict",
    "FieldDescriptor",
    "HttpHeaders",
    "NameRegistry",
    "UnsupportedKeyKind",
    "init",
    "wrap",
]

__version__ = "1.0.0"


def init():
    """One-off process setup, call it once at start up."""
    return logging.init_sentry()
