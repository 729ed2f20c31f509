"""Shared constants, errors, logging and configuration helpers."""
