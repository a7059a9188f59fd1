"""Session templates and the workout-of-the-day generator."""
