"""Readers and writers for sequence and taxonomy files."""
