"""Shared building blocks: base models, money, errors and the JSON envelope."""
