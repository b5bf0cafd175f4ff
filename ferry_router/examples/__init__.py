from .islands import EXAMPLE_REGISTRY, archipelago, random_islands

__all__ = ["EXAMPLE_REGISTRY", "archipelago", "random_islands"]
