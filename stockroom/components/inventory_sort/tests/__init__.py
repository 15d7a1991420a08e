"""Unit tests for the inventory_sort component."""
