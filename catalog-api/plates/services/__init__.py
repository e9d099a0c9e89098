from plates.services.plate_service import PlateService

__all__ = ["PlateService"]
