"""Document writers for annotation results."""
