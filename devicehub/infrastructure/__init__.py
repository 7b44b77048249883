"""Infrastructure layer: persistence backends for devices."""
