"""Framework adapters for cacheaside."""
