#!/usr/bin/env python3
"""Configuration validation script.

Usage:
    python scripts/validate_config.py [path/to/exercises.yaml]
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from exercises_app.config.loader import ConfigLoader
from exercises_app.config.validation import ConfigValidator
from exercises_app.errors import ConfigurationError


def main():
    """Main validation function."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_path)

    print(f"🔍 Validating {loader.config_path}...")

    if not loader.config_path.exists():
        print("ℹ️  File not found, defaults will be used")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
