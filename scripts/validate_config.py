#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bbands_app.config.loader import ConfigLoader
from bbands_app.config.validation import ConfigValidator, ValidationError
from bbands_app.engine import accept_params


def validate_preset(loader: ConfigLoader, preset_name: str) -> List[ValidationError]:
    """Validate configuration for a specific preset."""
    config = loader.merge_config(preset_name)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating BBands configuration...")

    loader = ConfigLoader.create()
    preset_names = sorted(loader.load_presets())

    if not preset_names:
        print(f"⚠️  No presets found in {loader.config_dir}")

    all_valid = True

    for preset_name in [None, *preset_names]:
        label = preset_name or "defaults"
        print(f"\n📊 Validating {label}...")

        try:
            errors = validate_preset(loader, preset_name)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
                continue

            params = loader.build_params(loader.merge_config(preset_name))
            if not accept_params(params):
                print(f"❌ Parameters rejected: {params}")
                all_valid = False
            else:
                print(f"✅ {label} configuration is valid ({params.to_list()})")

        except Exception as e:
            print(f"❌ Error validating {label}: {e}")
            all_valid = False

    print("\n" + "=" * 60)
    if all_valid:
        print("🎉 All configurations are valid!")
        sys.exit(0)
    else:
        print("⚠️  Configuration validation failed.")
        sys.exit(1)


if __name__ == "__main__":
    main()
