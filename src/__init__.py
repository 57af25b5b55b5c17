"""Club manager application package."""
