"""Core constants shared across layers."""

# Pagination bounds for list endpoints (page is 1-based).
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

# Only PDFs are accepted as attachments.
PDF_MAGIC = b"%PDF"
PDF_MIME_TYPE = "application/pdf"

# Free-text limits mirrored by the ORM column lengths.
DESCRIPTION_MAX_LENGTH = 500
REJECTION_MESSAGE_MAX_LENGTH = 500

# Placeholder used in expiration logs when a document has no attachment yet.
NO_ATTACHMENT_PLACEHOLDER = "N/A"
