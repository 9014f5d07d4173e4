# apps/immune/apps.py
"""
Immune app configuration

Owns the process-lifetime ImmuneService used by the HTTP endpoint.
"""
import logging
import threading

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ImmuneConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.immune"
    label = "immune"
    verbose_name = "Immune Response"

    def ready(self):
        self._service = None
        self._service_config = None
        self._service_lock = threading.Lock()

    def get_service(self):
        """
        Return the shared ImmuneService, creating it on first use

        Raises:
            DomainException: If the configuration cannot be loaded or wired
        """
        from apps.domain.models import DomainException
        from apps.infrastructure.config import get_config
        from apps.infrastructure.container import create_immune_service

        with self._service_lock:
            if self._service is None:
                try:
                    config = get_config()
                except ValueError as e:
                    logger.error(f"Failed to load immune config: {e}")
                    raise DomainException(f"Service initialization failed: {e}")

                self._service = create_immune_service(config)
                self._service_config = config
                logger.info("Immune service ready for HTTP requests")
            return self._service

    @property
    def service_config(self):
        return self._service_config

    def reset_service(self):
        """Drop the shared service; the next request builds a fresh store"""
        with self._service_lock:
            self._service = None
            self._service_config = None
