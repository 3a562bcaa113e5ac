"""Configuration handling for warmtree"""

from dataclasses import dataclass


@dataclass
class Config:
    """Configuration for warmtree with validation."""

    # Where git runs and which binary it is
    repo_path: str = "."
    git_executable: str = "git"

    # Execution modes
    list_only: bool = False  # Print a table instead of the interactive menu
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_git_executable()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not self.repo_path.strip():
            raise ValueError("repo_path cannot be empty")

    def _validate_git_executable(self):
        """Validate git_executable is not empty."""
        if not self.git_executable or not self.git_executable.strip():
            raise ValueError("git_executable cannot be empty")
        self.git_executable = self.git_executable.strip()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "git_executable": self.git_executable,
            "list_only": self.list_only,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "repo_path",
            "git_executable",
            "list_only",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
