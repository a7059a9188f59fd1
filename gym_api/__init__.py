"""HTTP API exposing the gym engine as JSON."""
