from app.utils.db import db
from .device import Device

__all__ = ['db', 'Device']
