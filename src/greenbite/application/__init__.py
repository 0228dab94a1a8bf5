"""Application layer - commands and queries over the shop domain."""
