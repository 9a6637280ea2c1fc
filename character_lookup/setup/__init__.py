"""Application Setup."""
