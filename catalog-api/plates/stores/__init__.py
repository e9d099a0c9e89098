from plates.stores.django_store import DjangoPlateStore
from plates.stores.interfaces import PlateStore

__all__ = ["PlateStore", "DjangoPlateStore"]
