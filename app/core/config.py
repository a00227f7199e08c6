# app/core/config.py
import os
from dotenv import load_dotenv

# Load .env into os.environ
load_dotenv()

# ─── DATABASE ────────────────────────────────────────────────────────────────
DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError(
        "Environment variable DATABASE_URL is not set. "
        "Please add a .env file with:\n"
        "    DATABASE_URL=postgresql://<your_user>@localhost:5432/workout_db"
    )

# Convert old-style "postgres://" URIs if necessary:
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# ─── JWT ─────────────────────────────────────────────────────────────────────
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise RuntimeError("Missing JWT_SECRET_KEY environment variable")

ALGORITHM = os.getenv("ALGORITHM", "HS256")

# Login tokens are short lived, the token handed out on registration lasts days
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
REGISTER_TOKEN_EXPIRE_DAYS  = int(os.getenv("REGISTER_TOKEN_EXPIRE_DAYS", "7"))

# ─── PASSWORDS ───────────────────────────────────────────────────────────────
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# ─── ORDERING ────────────────────────────────────────────────────────────────
ORDER_ASSIGN_RETRIES = int(os.getenv("ORDER_ASSIGN_RETRIES", "5"))

# ─── HTTP / LOGGING ──────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

PORT = int(os.getenv("PORT", "4000"))
