"""Contact information resource."""
