import logging
import re

from flask import current_app, jsonify, request

from ..errors import ValidationError
from ..models.device import Device

logger = logging.getLogger(__name__)

DEVICE_ID_PATTERN = re.compile(r'-?[0-9]+')
MAX_DEVICE_ID = 2 ** 63 - 1


def _repository():
    return current_app.extensions['device_repository']


def _parse_device_id(raw):
    # Digits with an optional minus sign, within a signed 64-bit column
    if raw is None or not DEVICE_ID_PATTERN.fullmatch(raw):
        raise ValidationError('Invalid device ID')
    device_id = int(raw)
    if not -MAX_DEVICE_ID - 1 <= device_id <= MAX_DEVICE_ID:
        raise ValidationError('Invalid device ID')
    return device_id


def _read_device_body():
    # id and creation_time are never taken from the client
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Invalid request body')
    name, brand = data.get('name'), data.get('brand')
    if not isinstance(name, str) or not name:
        raise ValidationError('Name is required')
    if not isinstance(brand, str) or not brand:
        raise ValidationError('Brand is required')
    return name, brand


def get_device(device_id):
    device = _repository().find_by_id(_parse_device_id(device_id))
    return jsonify(device.to_dict())


def get_device_by_query():
    return get_device(request.args.get('id'))


def create_device():
    name, brand = _read_device_body()
    device = _repository().save(Device(name=name, brand=brand))
    logger.info('Device added: %r', device)
    return jsonify(device.to_dict()), 201


def update_device(device_id):
    repository = _repository()
    device = repository.find_by_id(_parse_device_id(device_id))
    name, brand = _read_device_body()
    device.name = name
    device.brand = brand
    device = repository.update(device)
    logger.info('Device updated: %r', device)
    return jsonify(device.to_dict())


def delete_device(device_id):
    device_id = _parse_device_id(device_id)
    _repository().delete_by_id(device_id)
    logger.info('Device %s deleted', device_id)
    return '', 204


def list_devices():
    repository = _repository()
    brand = request.args.get('brand')
    devices = repository.find_by_brand(brand) if brand else repository.find_all()
    return jsonify([d.to_dict() for d in devices])


def list_all_devices():
    return jsonify([d.to_dict() for d in _repository().find_all()])


def search_devices():
    brand = request.args.get('brand')
    if not brand:
        raise ValidationError('Brand is required')
    return jsonify([d.to_dict() for d in _repository().find_by_brand(brand)])
