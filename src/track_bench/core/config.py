"""
Configuration management for Track Bench
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

VALID_BACKENDS = ("array", "linked")


@dataclass
class DataConfig:
    """Configuration for dataset locations."""

    data_dir: str = "data"
    preset_files: List[str] = field(
        default_factory=lambda: [
            "spotify_100.csv",
            "spotify_1000.csv",
            "spotify_10000.csv",
            "spotify_100000.csv",
            "spotify_FULL.csv",
        ]
    )
    encoding: str = "utf-8"
    decode_errors: str = "replace"  # errors= handler for open(); "strict" raises

    def preset_paths(self) -> List[Path]:
        """Resolve preset file names against the data directory."""
        base = Path(self.data_dir).expanduser()
        return [base / name for name in self.preset_files]


@dataclass
class StoreConfig:
    """Configuration for the track store backing structure."""

    backend: str = "array"  # 'array' or 'linked'

    def validate(self) -> None:
        """Validate store configuration values.

        Raises:
            ValueError: If the backend name is unknown
        """
        if self.backend not in VALID_BACKENDS:
            raise ValueError(
                f"Invalid store backend: {self.backend!r}. "
                f"Valid backends are: {', '.join(VALID_BACKENDS)}"
            )


@dataclass
class DisplayConfig:
    """Configuration for the display row budget."""

    full_limit: int = 100  # Show every row up to this many tracks
    medium_limit: int = 1000
    medium_rows: int = 50
    sample_divisor: int = 100  # Above medium_limit show size // sample_divisor rows

    def validate(self) -> None:
        """Validate display row budget values.

        Raises:
            ValueError: If a limit is negative or sample_divisor is below 1
        """
        for name in ("full_limit", "medium_limit", "medium_rows"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if not isinstance(self.sample_divisor, int) or self.sample_divisor < 1:
            raise ValueError(
                f"sample_divisor must be a positive integer, got {self.sample_divisor!r}"
            )


@dataclass
class PerformanceConfig:
    """Configuration for performance tests."""

    max_selection_sort_size: int = 20000


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/track-bench/track-bench.log)
    )


@dataclass
class Config:
    """Main configuration object."""

    data: DataConfig = field(default_factory=DataConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "track-bench"
    return Path.home() / ".config" / "track-bench"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/track-bench (or ~/.config/track-bench)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the application data directory path (logs)."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "track-bench"
    return Path.home() / ".local" / "share" / "track-bench"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring the configured override."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "track-bench.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Track Bench Configuration

[data]
# Directory holding the preset datasets
data_dir = "data"

# Datasets offered by the load menu (in order)
preset_files = [
    "spotify_100.csv",
    "spotify_1000.csv",
    "spotify_10000.csv",
    "spotify_100000.csv",
    "spotify_FULL.csv",
]

# Text encoding of the dataset files
encoding = "utf-8"

# How undecodable bytes are handled: "replace" (U+FFFD) or "strict" (error)
decode_errors = "replace"

[store]
# Backing structure: "array" or "linked"
backend = "array"

[display]
# Show every row up to this many tracks
full_limit = 100

# Up to this many tracks, show medium_rows rows
medium_limit = 1000
medium_rows = 50

# Above medium_limit, show size / sample_divisor rows
sample_divisor = 100

[performance]
# Skip selection sort in the sort comparison above this many tracks
max_selection_sort_size = 20000

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/track-bench/track-bench.log)
# log_file = "/path/to/custom/track-bench.log"
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Override TOML values with environment variables when present."""
    backend = os.environ.get("TRACK_BENCH_BACKEND")
    if backend:
        config.store.backend = backend.strip().lower()

    data_dir = os.environ.get("TRACK_BENCH_DATA_DIR")
    if data_dir:
        config.data.data_dir = str(Path(data_dir).expanduser())

    return config


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, keeping defaults for missing keys."""
    config = Config()

    if "data" in toml_data:
        data = toml_data["data"]
        config.data = DataConfig(
            data_dir=str(Path(data.get("data_dir", config.data.data_dir)).expanduser()),
            preset_files=list(data.get("preset_files", config.data.preset_files)),
            encoding=data.get("encoding", config.data.encoding),
            decode_errors=data.get("decode_errors", config.data.decode_errors),
        )

    if "store" in toml_data:
        store_data = toml_data["store"]
        config.store = StoreConfig(
            backend=str(store_data.get("backend", config.store.backend)).lower(),
        )

    if "display" in toml_data:
        display_data = toml_data["display"]
        config.display = DisplayConfig(
            full_limit=display_data.get("full_limit", config.display.full_limit),
            medium_limit=display_data.get("medium_limit", config.display.medium_limit),
            medium_rows=display_data.get("medium_rows", config.display.medium_rows),
            sample_divisor=display_data.get(
                "sample_divisor", config.display.sample_divisor
            ),
        )

    if "performance" in toml_data:
        performance_data = toml_data["performance"]
        config.performance = PerformanceConfig(
            max_selection_sort_size=performance_data.get(
                "max_selection_sort_size",
                config.performance.max_selection_sort_size,
            ),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
        )

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - TRACK_BENCH_BACKEND
    - TRACK_BENCH_DATA_DIR

    Args:
        config_path: Explicit config file; when omitted the standard lookup applies
            and a default file is created if none exists.
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    explicit = config_path is not None
    config_path = config_path if explicit else get_config_path()

    if not config_path.exists():
        if explicit:
            print(f"Configuration file not found: {config_path}")
            print("Using default configuration.")
            return _apply_env_overrides(Config())

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = parse_config(toml_data)
    except (OSError, tomllib.TOMLDecodeError, TypeError, AttributeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        config = Config()

    config = _apply_env_overrides(config)

    try:
        config.store.validate()
    except ValueError as e:
        print(f"Warning: Invalid store configuration: {e}")
        print("Using default store configuration.")
        config.store = StoreConfig()

    try:
        config.display.validate()
    except ValueError as e:
        print(f"Warning: Invalid display configuration: {e}")
        print("Using default display configuration.")
        config.display = DisplayConfig()

    return config
