"""Typed errors raised by the repository and rendered by the HTTP layer.

Each error carries the status code it maps to. Storage failures never expose
their detail to the caller; it is only logged.
"""

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Internal server error'


class DeviceStoreError(Exception):
    http_status = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_response(self):
        return {'error': self.message}


class ValidationError(DeviceStoreError):
    http_status = 400


class NotFound(DeviceStoreError):
    http_status = 404


class ConstraintViolation(DeviceStoreError):
    http_status = 422


class StorageError(DeviceStoreError):
    http_status = 500

    def to_response(self):
        return {'error': INTERNAL_ERROR_MESSAGE}


def register_error_handlers(app):
    @app.errorhandler(DeviceStoreError)
    def handle_device_store_error(error):
        if error.http_status >= 500:
            logger.error('%s %s failed: %s', request.method, request.path, error.message)
        else:
            logger.warning('%s %s rejected: %s', request.method, request.path, error.message)
        return jsonify(error.to_response()), error.http_status

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        logger.warning('%s %s: %s', request.method, request.path, error.name)
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify({'error': INTERNAL_ERROR_MESSAGE}), 500
