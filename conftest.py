import itertools
from datetime import datetime

import pytest

from app import create_app
from app.config import TestConfig
from app.errors import StorageError
from app.models.device import Device
from app.repositories import DeviceRepository
from app.utils.db import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repository(app):
    return app.extensions['device_repository']


class RecordingRepository(DeviceRepository):
    """Keeps saved devices in memory and remembers every save call."""

    def __init__(self):
        self.saved = []
        self._ids = itertools.count(1)

    def save(self, device):
        stored = Device(id=next(self._ids), name=device.name, brand=device.brand,
                        creation_time=datetime(2024, 1, 2, 3, 4, 5))
        self.saved.append(stored)
        return stored

    def find_by_id(self, device_id):
        raise StorageError('not used')

    def find_all(self):
        return list(self.saved)

    def find_by_brand(self, brand):
        return [d for d in self.saved if d.brand == brand]

    def update(self, device):
        return device

    def delete_by_id(self, device_id):
        raise StorageError('not used')

    def delete_all(self):
        self.saved.clear()


class BrokenRepository(DeviceRepository):
    """Every call fails the way an unreachable database would."""

    def _fail(self, *args):
        raise StorageError('connection refused by db-host:3306')

    save = find_by_id = find_all = find_by_brand = update = delete_by_id = _fail

    def delete_all(self):
        pass

    def ping(self):
        return False


def _stub_client(repository):
    app = create_app(TestConfig, repository=repository)
    return app.test_client()


@pytest.fixture
def recording_repository():
    return RecordingRepository()


@pytest.fixture
def recording_client(recording_repository):
    return _stub_client(recording_repository)


@pytest.fixture
def broken_client():
    return _stub_client(BrokenRepository())
