"""Pure load and progression math."""
