"""Domain layer - observation entities and complex obs handlers."""
