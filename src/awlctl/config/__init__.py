"""Configuration — settings models, awlctl.toml discovery, and logging setup."""
