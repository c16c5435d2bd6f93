"""Configuration and bundled strings."""
