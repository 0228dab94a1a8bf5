"""Domain layer for the GreenBite shop."""
