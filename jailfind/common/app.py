"""App constants."""

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "jailfind"
APP_AUTHOR = "jailfind"


class AppDirs:
    """App directories."""

    def __init__(self) -> None:
        """Initialize app directories."""
        self.app_config_dir = Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
        self.app_config_path = self.app_config_dir / "config.json"


app_dirs = AppDirs()
