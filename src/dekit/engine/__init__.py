"""Algorithm engine: driver loop and configuration loading."""
