"""Connection profiles and their on-disk configuration."""
