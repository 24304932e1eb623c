"""Output layer — render ServiceResult as Rich text, JSON, or quiet lines."""
