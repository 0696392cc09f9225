"""Infrastructure layer - cross-cutting concerns."""
