"""Service layer — configuration loading built on the domain models."""
