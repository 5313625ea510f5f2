"""Benchmarks for optres developments."""
