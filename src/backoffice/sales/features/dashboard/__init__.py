"""Read-only sales rollups for the seller dashboard."""
