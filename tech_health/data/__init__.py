"""Static framework catalogue."""
