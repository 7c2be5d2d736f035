"""Live board adapter: published state, refresh coordination and formatting."""
