"""Immutable inputs and outputs of the gym engine."""
