"""Print assessment API: intake, AI analysis and product hydration."""

__version__ = "0.1.0"
