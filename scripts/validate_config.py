#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

from pine_app.config.loader import ConfigLoader
from pine_app.config.validation import ConfigValidator, ValidationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating engine configuration in {loader.config_dir}...")

    errors = validate_config_dir(loader.config_dir)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    config = loader.merge_config()
    print(f"✅ Configuration is valid")
    print(f"   time_labels: {config['engine']['time_labels']}")
    print(f"   extra colors: {len(config['palette']['colors'])}")
    sys.exit(0)


if __name__ == "__main__":
    main()
