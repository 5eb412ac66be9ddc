"""Top-level package for natset."""

import importlib.metadata as importlib_metadata

from natset.api import *  # noqa: F401,F403
from natset.natset import NatSet, NatSetCollector  # noqa: F401

__version__ = importlib_metadata.version(__name__)
