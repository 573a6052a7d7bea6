"""Configuration management for Earworm."""

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from earworm.config.file_ops import write_text_file
from earworm.config.paths import default_config_path
from earworm.platform.logging import logger

CANDIDATE_COUNT_DEFAULT = 3


@dataclass
class Config:
    """Application configuration."""

    # Folders scanned when the CLI is given no directories
    music_dirs: list[Path] = field(default_factory=list)

    # Number of candidate tracks offered per round
    candidate_count: int = CANDIDATE_COUNT_DEFAULT

    # Log file path
    log_file: Path | None = None

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Normalise path-like values loaded from TOML strings."""
        if isinstance(self.music_dirs, (str, Path)):
            self.music_dirs = [self.music_dirs]
        elif not isinstance(self.music_dirs, list):
            raise TypeError(f"music_dirs must be a list of paths, got {type(self.music_dirs).__name__}")
        self.music_dirs = [Path(value).expanduser() for value in self.music_dirs if str(value).strip()]
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file).expanduser() if self.log_file.strip() else None

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file. Defaults to the portable config location.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        config_dict["music_dirs"] = [str(value) for value in self.music_dirs]
        if isinstance(config_dict["log_file"], Path):
            config_dict["log_file"] = str(config_dict["log_file"])

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# Earworm Configuration File")
        lines.append("")

        lines.append("# Music folders scanned when no directory is passed on the command line")
        lines.append('# Example: music_dirs = ["/path/to/music", "/path/to/more/music"]')
        lines.append(f"music_dirs = {self._format_toml_value(config['music_dirs'])}")
        lines.append("")

        lines.append("# Number of candidate tracks offered per round (default 3)")
        lines.append(f"candidate_count = {self._format_toml_value(config['candidate_count'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/earworm.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file is created from the defaults. Loads from the default
        location are cached for the lifetime of the process.

        Args:
            path: Explicit config file. Bypasses the cache when given.

        Returns:
            Config: Loaded configuration object.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {"music_dirs", "candidate_count", "log_file"}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                _ = instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        if path is None:
            cls._instance = instance
        return instance
