from app.api.services.models.service import Service


__all__ = ["Service"]
