"""Rule families evaluated by the gym engine."""
