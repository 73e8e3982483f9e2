"""Configuration management for spotipi."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from spotipi.config.file_ops import write_text_file
from spotipi.config.paths import default_config_path
from spotipi.platform.logging import logger

DEFAULT_PUBLIC_PREFIX = "/music"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".mp3", ".flac", ".opus", ".wav")
DEFAULT_MAX_WORKERS = 8
DEFAULT_EXTRACTION_TIMEOUT = 10.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5173


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Directory scanned for audio files; falls back to SPOTIPI_MUSIC_DIR, then static/music
    music_dir: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Public URL prefix the static file server exposes the music directory under
    public_prefix: str = DEFAULT_PUBLIC_PREFIX

    # Recognized audio suffixes, matched case-sensitively
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))

    # Extraction fan-out
    max_workers: int = DEFAULT_MAX_WORKERS
    extraction_timeout: float = DEFAULT_EXTRACTION_TIMEOUT

    # Development server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# spotipi Configuration File")
        lines.append("")

        lines.append("# Directory containing your audio files (optional)")
        lines.append("# Defaults to $SPOTIPI_MUSIC_DIR, then <repo>/static/music")
        lines.append('# Example: music_dir = "/path/to/your/music"')
        if config["music_dir"] is not None:
            lines.append(f"music_dir = {self._format_toml_value(config['music_dir'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/spotipi.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Public prefix used to build each track's filepath")
        lines.append(f"public_prefix = {self._format_toml_value(config['public_prefix'])}")
        lines.append("")

        lines.append("# Recognized audio extensions (case-sensitive)")
        lines.append(f"extensions = {self._format_toml_value(config['extensions'])}")
        lines.append("")

        lines.append("# Metadata extraction: worker cap and deadline in seconds (0 disables)")
        lines.append(f"max_workers = {self._format_toml_value(config['max_workers'])}")
        lines.append(
            f"extraction_timeout = {self._format_toml_value(config['extraction_timeout'])}"
        )
        lines.append("")

        lines.append("# Development server")
        lines.append(f"host = {self._format_toml_value(config['host'])}")
        lines.append(f"port = {self._format_toml_value(config['port'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = [
    "Config",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_EXTRACTION_TIMEOUT",
    "DEFAULT_HOST",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_PORT",
    "DEFAULT_PUBLIC_PREFIX",
]
