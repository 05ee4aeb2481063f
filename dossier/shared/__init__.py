"""Shared utilities and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""
