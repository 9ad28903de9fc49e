"""Hierarchical chart of accounts built from nested documents."""
