"""Infrastructure layer - filesystem, subprocess and configuration adapters."""
