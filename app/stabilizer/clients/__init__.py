"""Clients for the external resources retried tasks act on."""
