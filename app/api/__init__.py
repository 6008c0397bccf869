"""HTTP layer: dependencies, body validation and routes."""
