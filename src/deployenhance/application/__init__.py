"""Application layer: discovery, pipeline services, reporters."""
