"""Tag-cloud word placement."""
