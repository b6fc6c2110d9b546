"""Read-only Linux system statistics: memory, power supplies, batteries, backlights and users."""

__version__ = "0.1.0"