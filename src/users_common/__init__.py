"""Shared models and services for the Users API."""
