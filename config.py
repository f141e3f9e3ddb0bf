"""
RPS Match Configuration

Centralized settings, paths, and constants for the application.
"""

from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "RPSMatch"
APP_AUTHOR = "RPSMatch"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def log_file(self) -> Path:
        return self.log_dir / "rpsmatch.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class MatchSettings:
    """Match rules settings."""
    # First side to this many round wins takes the match
    win_threshold: int = 5


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Minimum window size
    min_width: int = 480
    min_height: int = 720

    # Font sizes
    robot_font_size: int = 100
    choice_font_size: int = 80
    title_font_size: int = 22
    score_font_size: int = 14

    # How long status bar messages stay visible
    message_timeout_ms: int = 5000


# Singleton instances
PATHS = Paths()
MATCH_SETTINGS = MatchSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()
