from flask import Blueprint
from ..controllers.health_controller import health_check, readiness_check

health_bp = Blueprint('health_bp', __name__)
health_bp.route('', methods=['GET'])(health_check)
health_bp.route('/ready', methods=['GET'])(readiness_check)
