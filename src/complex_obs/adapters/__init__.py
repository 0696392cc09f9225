"""Adapters layer - inbound (REST) and outbound (storage) implementations."""
