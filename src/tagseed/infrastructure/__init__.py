"""Infrastructure adapters: persistence and file handling."""
