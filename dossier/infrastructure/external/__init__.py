"""Clients for external collaborators: blob store and email provider."""
