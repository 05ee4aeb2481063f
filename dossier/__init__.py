"""Dossier: HR document-compliance backend (requisites, folders, attachments, expirations)."""
