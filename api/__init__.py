"""REST API for the structure evaluator."""
