"""Infrastructure layer: adapters for the capabilities rules delegate to."""
