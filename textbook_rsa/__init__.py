"""Textbook RSA key generation and per-character encryption."""
