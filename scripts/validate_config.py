#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quantity_restrictions.config.loader import ConfigLoader
from quantity_restrictions.config.validation import ConfigValidator


def main():
    """Validate config/quantity.yaml merged over the defaults."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating quantity configuration in {loader.config_dir} ...")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    issues = ConfigValidator.validate_config(config)
    if issues:
        print(f"Found {len(issues)} validation errors:")
        for issue in issues:
            print(f"  - {issue.field}: {issue.message} (value: {issue.value!r})")
        sys.exit(1)

    for section, values in config.items():
        print(f"  {section}: {values}")
    print("Configuration is valid")


if __name__ == "__main__":
    main()
