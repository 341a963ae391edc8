"""Default configuration parameters for the script engine."""

from dataclasses import dataclass, field


TIME_LABEL_MODES = ("bar", "index")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineParams:
    """Evaluation parameters."""
    # "bar" keeps the source bar time on every output point,
    # "index" labels points "0", "1", ... like the legacy chart feed
    time_labels: str = "bar"
    default_overlay: bool = True                     # Overlay flag on plotted indicators


@dataclass(frozen=True)
class PaletteParams:
    """Extra color tokens merged over the built-in color map."""
    colors: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    engine: EngineParams
    palette: PaletteParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        engine=EngineParams(),
        palette=PaletteParams(),
        logging=LoggingParams(),
    )
