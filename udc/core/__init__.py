"""Constants, exceptions and logging shared across the package."""
