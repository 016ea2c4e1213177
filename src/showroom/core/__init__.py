"""Core request pipeline: content, resolution, middleware and rendering."""
