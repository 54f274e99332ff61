"""Application paths configuration."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path
    credentials_path: Path
    css_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
        )
        config_dir = config_home / "repo-cleaner"
        gui_dir = Path(__file__).parent.parent / "gui"

        return cls(
            config_path=config_dir / "settings.yml",
            credentials_path=config_dir / "credentials.json",
            css_path=gui_dir / "style.css",
        )
