"""Core types, errors, and problem abstractions shared across dekit."""
