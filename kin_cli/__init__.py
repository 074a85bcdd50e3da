"""Kin — tiered identity resolution for a personal assistant."""
