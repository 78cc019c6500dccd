"""Entrypoints for servekit."""
