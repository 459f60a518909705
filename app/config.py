import os
from dotenv import load_dotenv

load_dotenv()


def database_uri():
    url = os.getenv('DATABASE_URL')
    if url:
        return url
    return (
        f"mysql+pymysql://{os.getenv('DB_USER', 'user')}:"
        f"{os.getenv('DB_PASS', 'password')}@"
        f"{os.getenv('DB_HOST', 'localhost:3306')}/"
        f"{os.getenv('DB_NAME', 'device_store')}"
    )


class Config:
    SQLALCHEMY_DATABASE_URI = database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Connections live at most 3 minutes, 10 of them at a time
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 180,
        'pool_size': 10,
        'max_overflow': 0,
        'pool_pre_ping': True,
    }
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '5000'))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
