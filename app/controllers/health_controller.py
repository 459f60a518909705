from flask import current_app, jsonify


def health_check():
    return jsonify({'status': 'healthy', 'service': 'device-store'})


def readiness_check():
    if not current_app.extensions['device_repository'].ping():
        return jsonify({'status': 'not_ready', 'reason': 'database_unavailable'}), 503
    return jsonify({'status': 'ready', 'checks': {'database': 'healthy'}})
