"""Adapters – third-party transports behind library ports."""
