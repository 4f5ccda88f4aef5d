"""Entity services: validation, integrity checks and persistence."""
