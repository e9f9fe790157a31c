"""
modxinstall - Download, configure and install a fresh MODX Revolution site
"""

__version__ = "0.1.0"

from .core import ModxInstaller
from .errors import InstallerError

__all__ = ["ModxInstaller", "InstallerError"]
