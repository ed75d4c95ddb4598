"""Tests for TableFit."""
