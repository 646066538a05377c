"""Output layer: Rich and JSON rendering of ServiceResult for the CLI."""
