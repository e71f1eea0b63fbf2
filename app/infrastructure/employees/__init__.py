"""Adapters implementing the employees domain ports."""
