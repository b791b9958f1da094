"""Configuration persistence manager for Pixel Remap.

This module handles loading and saving of user configuration to/from JSON files.
"""

import json
import sys
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, RemapConfig, RemapMode


class ConfigManager:
    """Handles loading and saving of remap configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.pixel_remap_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> RemapConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            RemapConfig with loaded or default values
        """
        config = RemapConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    labels = data.get("labels", config.labels)
                    if not isinstance(labels, list) or not all(
                        isinstance(label, str) and label.strip() for label in labels
                    ):
                        raise ValueError("'labels' must be a list of non-empty strings")
                    config.labels = [label.strip() for label in labels]
                    config.mode = RemapMode(data.get("mode", config.mode.value))
                    config.swatch_size = int(data.get("swatch_size", config.swatch_size))
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)
            config = RemapConfig()

        return config

    def save(self, config: RemapConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: RemapConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = {
            "labels": list(config.labels),
            "mode": config.mode.value,
            "swatch_size": config.swatch_size,
        }
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
