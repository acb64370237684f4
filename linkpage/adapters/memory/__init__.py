from .repos import InMemoryBlockRepo, InMemoryLinkRepo, InMemoryProfileRepo

__all__ = ["InMemoryBlockRepo", "InMemoryLinkRepo", "InMemoryProfileRepo"]
