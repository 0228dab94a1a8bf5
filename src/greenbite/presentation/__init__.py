"""Presentation layer - HTTP API and command line."""
