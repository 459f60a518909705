from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

from app import create_app
from app.utils.db import db

app = create_app()


def create_database_if_not_exists():
    """Create the MySQL schema named in the URL when it is missing."""
    url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
    if url.get_backend_name() != 'mysql' or not url.database:
        return
    engine = create_engine(url.set(database=None))
    try:
        with engine.connect() as conn:
            conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{url.database}`"))
    finally:
        engine.dispose()


def init_storage():
    create_database_if_not_exists()
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_storage()
    app.run(host=app.config['HOST'], port=app.config['PORT'])
