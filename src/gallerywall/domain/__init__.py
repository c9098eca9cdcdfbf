"""Domain layer: value objects and pure layout calculations."""
