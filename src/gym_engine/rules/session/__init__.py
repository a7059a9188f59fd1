"""Session-selection steps: rotation, schedule, availability, interference."""
