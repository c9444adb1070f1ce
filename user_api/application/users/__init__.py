"""Users application layer."""
