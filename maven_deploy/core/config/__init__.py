"""Configuration: raw host maps and YAML config files."""
