"""Infrastructure: persistence, blob storage, email delivery, security."""
