"""Domain layer: movie records, repository interface and errors."""
