"""Infrastructure layer for the GreenBite shop."""
