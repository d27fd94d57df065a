import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent  # <project>
INSTANCE_DIR = BASE_DIR / "instance"

def _default_sqlite_uri():
    return f"sqlite:///{(INSTANCE_DIR / 'uklid.db').as_posix()}"

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or _default_sqlite_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UKLID_LOCALE = os.getenv("UKLID_LOCALE", "cs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # create missing tables on start-up (migrations handle changes)
    AUTO_CREATE_SCHEMA = bool(int(os.getenv("AUTO_CREATE_SCHEMA", "1")))
    # https-only deployment behind a TLS-terminating proxy
    FORCE_HTTPS = bool(int(os.getenv("FORCE_HTTPS", "0")))
    HSTS_MAX_AGE = int(os.getenv("HSTS_MAX_AGE", str(30 * 24 * 3600)))
    # number of reverse proxies in front of the app; 0 = none
    PROXY_FIX = int(os.getenv("PROXY_FIX", "1"))

    # tokens live as long as the session
    WTF_CSRF_TIME_LIMIT = None

class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = "WARNING"
    PROXY_FIX = 0

def ensure_instance(app):
    # Flask instance path
    os.makedirs(app.instance_path, exist_ok=True)
    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite:///"):
        Path(uri[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
