"""Language generators."""
