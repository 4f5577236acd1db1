#!/usr/bin/env python3
"""Print the example output of every exercise.

Usage:
    python scripts/run_demo.py [path/to/exercises.yaml]
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from exercises_app.config.loader import ConfigLoader
from exercises_app.demo import run_demo
from exercises_app.errors import ConfigurationError
from exercises_app.logging.config import configure_from_params


def main():
    """Load configuration, set up logging and run the demo."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        config = ConfigLoader.create(config_path).load()
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        for error in e.errors:
            print(f"  • {error.field}: {error.message}", file=sys.stderr)
        sys.exit(1)

    configure_from_params(config.logging)
    run_demo(config)


if __name__ == "__main__":
    main()
