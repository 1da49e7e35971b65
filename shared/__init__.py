"""
shared package: data models and helpers used by the core, providers and entry points.
"""
