"""Deterministic trip aggregation and progress logic."""
