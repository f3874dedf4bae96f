"""Login and register screens rendered with Reflex."""
