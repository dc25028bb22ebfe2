"""HTTP interface for string art patterns."""
