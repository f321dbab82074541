"""Input preparation applied before annotation."""
