"""Table structure: parts, rows, cells and text runs."""
