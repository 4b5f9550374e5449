"""Display configuration loaded from YAML."""
import logging

import yaml

logger = logging.getLogger(__name__)


def load_config(path):
    """Read a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed configuration dictionary, empty when the file has no content
    """
    with open(path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)
    return config or {}


class DisplaySettings:
    """Text markers and spacing used when rendering the menu."""

    def __init__(self, indent_width=2, active_marker="✓", inactive_marker="✗",
                 group_marker="▼", url_separator="→", banner="=== Menu Principal ==="):
        if not isinstance(indent_width, int) or isinstance(indent_width, bool) or indent_width < 0:
            raise ValueError(f"indent_width must be a non-negative integer, got {indent_width!r}")
        for key, value in (('active_marker', active_marker), ('inactive_marker', inactive_marker),
                           ('group_marker', group_marker), ('url_separator', url_separator),
                           ('banner', banner)):
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {value!r}")
        self.indent_width = indent_width
        self.active_marker = active_marker
        self.inactive_marker = inactive_marker
        self.group_marker = group_marker
        self.url_separator = url_separator
        self.banner = banner

    @classmethod
    def from_config(cls, config):
        """Build settings from the 'display' section of a config dictionary."""
        display_config = (config or {}).get('display') or {}
        defaults = cls()
        return cls(
            indent_width=display_config.get('indent_width', defaults.indent_width),
            active_marker=display_config.get('active_marker', defaults.active_marker),
            inactive_marker=display_config.get('inactive_marker', defaults.inactive_marker),
            group_marker=display_config.get('group_marker', defaults.group_marker),
            url_separator=display_config.get('url_separator', defaults.url_separator),
            banner=display_config.get('banner', defaults.banner),
        )
