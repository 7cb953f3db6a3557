"""Internal implementation package for segtri. Prefer the flat ``segtri`` API."""
