"""Infrastructure layer: filesystem, zip and import-system bindings."""
