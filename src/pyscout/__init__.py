"""Season resolution and batch-relative scoring for player records."""
