#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gbce_app.config.loader import ConfigLoader
from gbce_app.config.validation import ConfigValidator, ValidationError
from gbce_app.logging import configure_logging, get_logger


def validate_settings(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating GBCE App configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_settings(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        config = loader.load()
        configure_logging(**asdict(config.logging))
        get_logger(__name__).info("configuration_loaded", config_dir=str(loader.config_dir))
        print("✅ settings.yaml is valid")
        print(f"  • decimal_places: {config.calculation.decimal_places}")
        print(f"  • vwsp_window_minutes: {config.calculation.vwsp_window_minutes}")
        print(f"  • logging level: {config.logging.level}")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
