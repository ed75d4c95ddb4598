"""Tests for table layout."""
