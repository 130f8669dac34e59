"""Infrastructure layer: logging, error handling, singletons and pooling."""
