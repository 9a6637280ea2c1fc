"""HTTP Presentation."""
