"""Engine configuration: defaults, YAML overrides and validation."""
