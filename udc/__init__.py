"""User Directory Console: filter a small user directory by name, job and company."""

__version__ = "0.1.0"
