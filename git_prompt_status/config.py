"""Configuration handling for git-prompt-status"""

from dataclasses import dataclass, field
from typing import Optional, List

from git_prompt_status.constants import (
    BACKENDS,
    BACKEND_GITPYTHON,
    CATEGORY_NAMES,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_MAX_TRAVERSAL_STEPS,
    MODES,
    MODE_FANCY,
)


@dataclass
class Config:
    """Configuration for git-prompt-status with validation."""

    # Display
    mode: str = MODE_FANCY  # simple, compact, fancy
    disable_stats: List[str] = field(default_factory=list)
    ascii_symbols: bool = False
    color: bool = True
    lite: bool = False  # Branch only, no status or divergence

    # Repository selection
    ignore_repos: List[str] = field(default_factory=list)
    backend: str = BACKEND_GITPYTHON

    # Guards
    assume_unchanged_size: int = 0  # KiB, 0 disables the check
    max_traversal_steps: int = DEFAULT_MAX_TRAVERSAL_STEPS
    traversal_timeout: Optional[float] = None  # Seconds, None = no wall-clock guard
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT

    # Diagnostics
    verbose: bool = False
    debug: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_mode()
        self._validate_disable_stats()
        self._validate_backend()
        self._validate_ignore_repos()
        self._validate_assume_unchanged_size()
        self._validate_max_traversal_steps()
        self._validate_timeouts()

    def _validate_mode(self):
        """Validate mode is one of allowed values."""
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got '{self.mode}'")

    def _validate_disable_stats(self):
        """Validate disable_stats only names known categories."""
        if not isinstance(self.disable_stats, list):
            raise ValueError("disable_stats must be a list")
        self.disable_stats = [stat.strip() for stat in self.disable_stats if stat.strip()]
        unknown = [stat for stat in self.disable_stats if stat not in CATEGORY_NAMES]
        if unknown:
            raise ValueError(f"disable_stats entries must be in {CATEGORY_NAMES}, got {unknown}")

    def _validate_backend(self):
        """Validate backend is one of allowed values."""
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got '{self.backend}'")

    def _validate_ignore_repos(self):
        """Validate ignore_repos list."""
        if not isinstance(self.ignore_repos, list):
            raise ValueError("ignore_repos must be a list")
        self.ignore_repos = [path.strip() for path in self.ignore_repos if path.strip()]

    def _validate_assume_unchanged_size(self):
        """Validate assume_unchanged_size is not negative."""
        if self.assume_unchanged_size < 0:
            raise ValueError(
                f"assume_unchanged_size must not be negative, got {self.assume_unchanged_size}"
            )

    def _validate_max_traversal_steps(self):
        """Validate max_traversal_steps is positive."""
        if self.max_traversal_steps <= 0:
            raise ValueError(
                f"max_traversal_steps must be positive, got {self.max_traversal_steps}"
            )

    def _validate_timeouts(self):
        """Validate timeouts are positive."""
        if self.traversal_timeout is not None and self.traversal_timeout <= 0:
            raise ValueError(
                f"traversal_timeout must be positive, got {self.traversal_timeout}"
            )
        if self.command_timeout <= 0:
            raise ValueError(f"command_timeout must be positive, got {self.command_timeout}")

    def is_disabled(self, category: str) -> bool:
        """Check whether a category is hidden from display."""
        return category in self.disable_stats

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "mode": self.mode,
            "disable_stats": self.disable_stats,
            "ascii_symbols": self.ascii_symbols,
            "color": self.color,
            "lite": self.lite,
            "ignore_repos": self.ignore_repos,
            "backend": self.backend,
            "assume_unchanged_size": self.assume_unchanged_size,
            "max_traversal_steps": self.max_traversal_steps,
            "traversal_timeout": self.traversal_timeout,
            "command_timeout": self.command_timeout,
            "verbose": self.verbose,
            "debug": self.debug,
            "log_file": self.log_file,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "mode",
            "disable_stats",
            "ascii_symbols",
            "color",
            "lite",
            "ignore_repos",
            "backend",
            "assume_unchanged_size",
            "max_traversal_steps",
            "traversal_timeout",
            "command_timeout",
            "verbose",
            "debug",
            "log_file",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
