from sqlalchemy import func

from . import db


class Device(db.Model):
    __tablename__ = 'devices'
    __table_args__ = (
        db.UniqueConstraint('name', 'brand', name='uq_devices_name_brand'),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    brand = db.Column(db.String(255), nullable=False)
    creation_time = db.Column(db.DateTime, nullable=False, server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'brand': self.brand,
            'creation_time': self.creation_time.isoformat() if self.creation_time else None,
        }

    def __repr__(self):
        return f'<Device {self.id} {self.name!r} ({self.brand!r})>'
