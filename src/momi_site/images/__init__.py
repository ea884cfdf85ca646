"""Read-only access to the generated image manifest."""
