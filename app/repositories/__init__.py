from .device_repository import DeviceRepository, SqlDeviceRepository

__all__ = ['DeviceRepository', 'SqlDeviceRepository']
