"""Persistence adapters implementing domain repository interfaces."""
