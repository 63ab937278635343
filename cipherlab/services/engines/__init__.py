"""Classical cipher engines."""
