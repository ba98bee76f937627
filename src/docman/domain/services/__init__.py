"""Domain services: marker extraction and reference resolution."""
