"""
Configuration for LaTeX repair and buffer alignment.

The defaults reproduce the fixed behavior of the repair pipeline and the
synthesizer; create a config only to tune tolerances or extend the
command vocabulary.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from ocrtex.exceptions import ConfigurationError
from ocrtex.models import COORDINATE_TOLERANCE

# Vertical distance under which two items count as the same visual line
LINE_TOLERANCE = 0.01


@dataclass
class RepairConfig:
    r"""
    Configuration for the LaTeX repair pipeline.

    Example:
        >>> config = RepairConfig(additional_commands={"mathfrak"})
        >>> clean(r"\mathfrck{g}", config)
        '\\mathfrak{g}'
    """

    # Fuzzy command correction (pass 6); literal and structural passes always run
    fuzzy_commands: bool = True
    unify_greek_case: bool = True

    # Edit-distance budgets
    max_prefixed_distance: int = 2  # Backslash-like prefix and more than 4 letters
    max_plain_distance: int = 1  # Everything else

    # Extra command names appended after the built-in vocabulary
    additional_commands: set[str] = field(default_factory=set)

    def __post_init__(self):
        """Validate configuration."""
        if self.max_plain_distance < 0:
            raise ValueError(f"max_plain_distance must be >= 0, got {self.max_plain_distance}")
        if self.max_prefixed_distance < self.max_plain_distance:
            raise ValueError(
                f"max_prefixed_distance must be >= max_plain_distance, "
                f"got {self.max_prefixed_distance} < {self.max_plain_distance}"
            )
        bad = sorted(
            repr(c) for c in self.additional_commands if not (isinstance(c, str) and c.isalpha())
        )
        if bad:
            raise ValueError(f"additional_commands must be alphabetic names, got {bad}")


@dataclass
class AlignmentConfig:
    """
    Configuration for OCR/buffer synthesis and frame-to-frame stability.

    Example:
        >>> config = AlignmentConfig(line_tolerance=0.02)
        >>> fused = synthesize(items, buffer, config)
    """

    line_tolerance: float = LINE_TOLERANCE
    coordinate_tolerance: float = COORDINATE_TOLERANCE
    repair: RepairConfig = field(default_factory=RepairConfig)

    def __post_init__(self):
        """Validate configuration."""
        for name in ("line_tolerance", "coordinate_tolerance"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"{name} must be in [0, 1), got {value}")


def _build(cls, data: dict, label: str):
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown {label} option(s): {', '.join(unknown)}")
    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {label} options: {e}") from e


def load_config(path: Path | str) -> AlignmentConfig:
    """
    Load an AlignmentConfig from a YAML file.

    The file holds a mapping of AlignmentConfig fields; the optional
    ``repair`` key holds a mapping of RepairConfig fields.

    Raises:
        ConfigurationError: If the file is unreadable, not a mapping, or
            contains unknown or invalid options.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must contain a mapping")

    data = dict(data)
    repair_data = data.pop("repair", None) or {}
    if not isinstance(repair_data, dict):
        raise ConfigurationError("'repair' must be a mapping")
    commands = repair_data.pop("additional_commands", None)
    if isinstance(commands, str):
        commands = [commands]
    if commands is not None:
        if not isinstance(commands, list):
            raise ConfigurationError("'additional_commands' must be a list of names")
        try:
            repair_data["additional_commands"] = set(commands)
        except TypeError as e:
            raise ConfigurationError(f"'additional_commands' must be a list of names: {e}") from e

    repair = _build(RepairConfig, repair_data, "repair")
    return _build(AlignmentConfig, {**data, "repair": repair}, "alignment")
