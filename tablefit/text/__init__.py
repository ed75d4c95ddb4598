"""Text measurement."""
