"""Config domain models for pathlang.

Configuration is stored in .pathlang/config.toml (and optionally a global
config file) and holds user preferences for CLI output. It never changes the
language registry. This module defines the domain models that represent
validated configuration state.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal

_COLOR_SCHEMES = ("auto", "always", "never")
_OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for output display and formatting.

    Attributes:
        syntax_highlighting: Enable syntax highlighting for file output (default: True)
        color_scheme: Color output mode - "auto" (default), "always", or "never"

    Raises:
        ValueError: If syntax_highlighting is not a boolean or color_scheme
            is not a known mode.
    """

    syntax_highlighting: bool = True
    color_scheme: Literal["auto", "always", "never"] = "auto"

    def __post_init__(self) -> None:
        """Validate display config after initialization."""
        if not isinstance(self.syntax_highlighting, bool):
            raise ValueError(
                "syntax_highlighting must be true or false, "
                f"got {self.syntax_highlighting!r}"
            )
        if self.color_scheme not in _COLOR_SCHEMES:
            raise ValueError(
                f"color_scheme must be one of {', '.join(_COLOR_SCHEMES)}, "
                f"got {self.color_scheme!r}"
            )


@dataclass(frozen=True)
class OutputConfig:
    """Configuration for command output.

    Attributes:
        format: Default output format - "text" (default) or "json"

    Raises:
        ValueError: If format is not a known output format.
    """

    format: Literal["text", "json"] = "text"

    def __post_init__(self) -> None:
        """Validate output config after initialization."""
        if self.format not in _OUTPUT_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(_OUTPUT_FORMATS)}, got {self.format!r}"
            )


def _section(cls: type, current: Any, data: Any) -> Any:
    """Apply a raw TOML section on top of a config section."""
    if not isinstance(data, dict):
        raise ValueError(f"Config section must be a table, got {type(data).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return replace(current, **data)


@dataclass(frozen=True)
class PathlangConfig:
    """Complete pathlang configuration.

    Attributes:
        display: Display and formatting configuration
        output: Command output configuration
    """

    display: DisplayConfig = field(default_factory=DisplayConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def default() -> "PathlangConfig":
        """Create a config with all default values."""
        return PathlangConfig(display=DisplayConfig(), output=OutputConfig())

    @staticmethod
    def from_partial(base: "PathlangConfig", data: dict[str, Any]) -> "PathlangConfig":
        """Merge raw config data over an existing config.

        Sections present in data override the matching keys of base; missing
        sections and keys keep the base values. Validation runs on every
        section that changes.

        Args:
            base: Config to start from.
            data: Parsed TOML data.

        Returns:
            New merged PathlangConfig.

        Raises:
            ValueError: If a section or value is invalid.
        """
        display = base.display
        output = base.output
        if "display" in data:
            display = _section(DisplayConfig, display, data["display"])
        if "output" in data:
            output = _section(OutputConfig, output, data["output"])
        return PathlangConfig(display=display, output=output)
