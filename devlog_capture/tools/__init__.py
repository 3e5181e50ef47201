"""CLI tools for Devlog Capture."""
