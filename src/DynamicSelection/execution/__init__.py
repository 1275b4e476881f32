"""Robot Framework execution hooks."""
