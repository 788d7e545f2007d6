"""Infrastructure layer - configuration, logging and the Product Store client."""
