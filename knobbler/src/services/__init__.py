"""Knob engines and the pure functions they are built from."""
