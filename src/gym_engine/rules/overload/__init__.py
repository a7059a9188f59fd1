"""Progressive-overload decision table, one rule per row."""
