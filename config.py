# config.py - configuration constants
import os
from pathlib import Path

from cachelib import FileSystemCache

# Create instance folder if it doesn't exist
INSTANCE_PATH = Path(__file__).parent / 'instance'
INSTANCE_PATH.mkdir(exist_ok=True)

# Database file will be stored in the instance folder
DB_PATH = INSTANCE_PATH / 'quiz.db'

# Server-side session files live next to the database
SESSION_DIR = Path(os.getenv("SESSION_FILE_DIR", str(INSTANCE_PATH / "flask_session")))

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "supersecretkey")
    # Use DATABASE_URL for production, fallback to SQLite for local development
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH.absolute()}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    INSTANCE_PATH = str(INSTANCE_PATH)
    # - pool_pre_ping checks connections before use to avoid stale/expired sockets
    # - pool_recycle forces periodic reconnects to reduce SSL/idle issues
    # - pool_timeout controls how long to wait for a connection from the pool
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": int(os.getenv("SQLALCHEMY_POOL_RECYCLE", "280")),
        "pool_timeout": int(os.getenv("SQLALCHEMY_POOL_TIMEOUT", "10")),
    }

    # Where quizzes come from: "sql" (database tables) or "hardcoded" (built-in fixture)
    QUIZ_CATALOG = os.getenv("QUIZ_CATALOG", "sql")

    # Attempt state is kept server-side (Flask-Session); the cookie only carries the id
    SESSION_TYPE = "cachelib"
    SESSION_CACHELIB = FileSystemCache(str(SESSION_DIR), threshold=500)
    SESSION_PERMANENT = False

    # Cookie/session security (tunable via env for local vs prod)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    # Don't force Secure cookies locally unless explicitly enabled
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0") == "1"

    # Preferred scheme for URL generation in prod behind HTTPS
    PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")
