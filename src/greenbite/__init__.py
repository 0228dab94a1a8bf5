"""GreenBite - e-commerce backend.

Catalog, cart and order management on top of the identity package
(greenbite_identity), exposed through a FastAPI application.
"""
