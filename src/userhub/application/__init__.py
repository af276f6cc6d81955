"""Application layer: request validation, response DTOs and services."""
