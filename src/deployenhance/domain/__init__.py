"""Domain layer: value objects, ports and exceptions. No I/O."""
