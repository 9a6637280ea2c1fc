"""Character Lookup Service."""
