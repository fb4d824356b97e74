"""Output layer — Rich, JSON, and quiet renderings of ServiceResult."""
