"""Data contracts for edge device services: readings, value descriptors, profile parts and states, with JSON encoding and validation."""

__version__ = "0.1.0"