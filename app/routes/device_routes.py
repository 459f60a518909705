from flask import Blueprint
from ..controllers.device_controller import (
    create_device, delete_device, get_device, get_device_by_query,
    list_all_devices, list_devices, search_devices, update_device,
)

device_bp = Blueprint('device_bp', __name__)
device_bp.route('/device/<device_id>', methods=['GET'])(get_device)
device_bp.route('/device/<device_id>', methods=['PUT'])(update_device)
device_bp.route('/device/<device_id>', methods=['DELETE'])(delete_device)
device_bp.route('/device', methods=['GET'])(get_device_by_query)
device_bp.route('/device', methods=['POST'])(create_device)
device_bp.route('/devices', methods=['POST'])(create_device)
device_bp.route('/devices', methods=['GET'])(list_devices)
device_bp.route('/list-devices', methods=['GET'])(list_all_devices)
device_bp.route('/search-device', methods=['GET'])(search_devices)
