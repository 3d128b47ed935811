"""
git-prompt-status - Git branch and change summary for shell prompts
"""

from .__version__ import __version__
from .services.status_service import StatusService
from .cli.main import main

__all__ = ["StatusService", "main", "__version__"]
