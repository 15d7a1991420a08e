"""Unit tests for the discount component."""
