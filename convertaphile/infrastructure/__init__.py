"""Infrastructure layer - external tools, filesystem and persistence."""
