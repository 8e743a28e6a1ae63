"""Blog posts resource."""
