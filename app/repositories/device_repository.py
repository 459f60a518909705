"""Data access for devices.

SqlDeviceRepository is the only implementation used at runtime. The abstract
DeviceRepository exists so tests can hand the app a stub instead.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import ConstraintViolation, NotFound, StorageError, ValidationError
from ..models.device import Device
from ..utils.db import db

logger = logging.getLogger(__name__)


def not_found(device_id):
    return NotFound(f'Device with id {device_id} not found')


def require_name_and_brand(device):
    """Reject a device without a name or brand before it reaches storage."""
    if not device.name:
        raise ValidationError('Name is required')
    if not device.brand:
        raise ValidationError('Brand is required')


class DeviceRepository(ABC):

    @abstractmethod
    def save(self, device: Device) -> Device:
        """Insert a new device and return it as stored."""

    @abstractmethod
    def find_by_id(self, device_id: int) -> Device:
        ...

    @abstractmethod
    def find_all(self) -> List[Device]:
        ...

    @abstractmethod
    def find_by_brand(self, brand: str) -> List[Device]:
        ...

    @abstractmethod
    def update(self, device: Device) -> Device:
        ...

    @abstractmethod
    def delete_by_id(self, device_id: int) -> None:
        ...

    @abstractmethod
    def delete_all(self) -> None:
        ...

    def ping(self) -> bool:
        return True


class SqlDeviceRepository(DeviceRepository):

    def save(self, device):
        require_name_and_brand(device)
        new = Device(name=device.name, brand=device.brand)
        try:
            db.session.add(new)
            # flush yields the generated id, not the server-side timestamp
            db.session.flush()
            device_id = new.id
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning('Duplicate device %s (%s): %s', device.name, device.brand, e.orig)
            raise ConstraintViolation(
                f'Device {device.name} ({device.brand}) already exists') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error adding device %s (%s): %s', device.name, device.brand, e)
            raise StorageError('Could not save device') from e

        try:
            return self.find_by_id(device_id)
        except NotFound as e:
            logger.error('Device %s disappeared right after insert', device_id)
            raise StorageError(f'Device {device_id} could not be read back') from e

    def find_by_id(self, device_id):
        try:
            device = (Device.query
                      .filter_by(id=device_id)
                      .populate_existing()
                      .one_or_none())
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error finding device %s: %s', device_id, e)
            raise StorageError(f'Could not read device {device_id}') from e
        if device is None:
            raise not_found(device_id)
        return device

    def find_all(self):
        try:
            return Device.query.order_by(Device.id).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error finding devices: %s', e)
            raise StorageError('Could not list devices') from e

    def find_by_brand(self, brand):
        try:
            return Device.query.filter_by(brand=brand).order_by(Device.id).all()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error finding devices of brand %s: %s', brand, e)
            raise StorageError(f'Could not search devices of brand {brand}') from e

    def update(self, device):
        require_name_and_brand(device)
        statement = (update(Device)
                     .where(Device.id == device.id)
                     .values(name=device.name, brand=device.brand)
                     .execution_options(synchronize_session=False))
        try:
            with db.session.no_autoflush:
                result = db.session.execute(statement)
            if result.rowcount == 0:
                db.session.rollback()
                raise not_found(device.id)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning('Update of device %s collides with an existing device: %s',
                           device.id, e.orig)
            raise ConstraintViolation(
                f'Device {device.name} ({device.brand}) already exists') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error updating device %s: %s', device.id, e)
            raise StorageError(f'Could not update device {device.id}') from e
        return device

    def delete_by_id(self, device_id):
        device = self.find_by_id(device_id)
        try:
            db.session.delete(device)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error deleting device %s: %s', device_id, e)
            raise StorageError(f'Could not delete device {device_id}') from e

    def delete_all(self):
        try:
            Device.query.delete()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Error deleting devices: %s', e)

    def ping(self):
        try:
            db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Database health check failed: %s', e)
            return False
