"""localfmt test suite."""
