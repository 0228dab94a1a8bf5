"""GreenBite command line interface (Typer)."""
