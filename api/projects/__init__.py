"""Portfolio projects resource."""
