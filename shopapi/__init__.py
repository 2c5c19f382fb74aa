"""JSON HTTP API for a shop catalogue of products and categories, with a sample-data loader."""

__version__ = "0.1.0"