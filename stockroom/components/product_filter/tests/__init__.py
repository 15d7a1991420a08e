"""Unit tests for the product_filter component."""
