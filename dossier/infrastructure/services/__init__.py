from dossier.infrastructure.services.notification_service import (
    EmailNotificationService,
)
from dossier.infrastructure.services.notification_templates import (
    NotificationTemplateRenderer,
)

__all__ = ["EmailNotificationService", "NotificationTemplateRenderer"]
