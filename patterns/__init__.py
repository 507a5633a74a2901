"""Reusable patterns behind the dashboard engine.

Each module is a self-contained pattern the business and access layers
build on: vertical domain configuration, declarative access rules, and
the tenant-scoped repository layer.
"""
