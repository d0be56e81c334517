"""
Runtime configuration for the vulnerable user lab.
Values come from the environment or a local .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()

DB_URL = os.getenv("LAB_DB_URL", "sqlite:///vulnerable_lab.db")
HOST = os.getenv("LAB_HOST", "127.0.0.1")
PORT = int(os.getenv("LAB_PORT", "8080"))
DEBUG = os.getenv("LAB_DEBUG", "false").lower() in ("1", "true", "yes")

# Rows inserted by seed_users() when the users table is empty
SEED_USERS = [
    {"username": "admin", "password": "admin123", "email": "admin@vulnerable.com"},
    {"username": "john", "password": "password123", "email": "john@example.com"},
    {"username": "jane", "password": "secret456", "email": "jane@example.com"},
    {"username": "bob", "password": "qwerty", "email": "bob@example.com"},
]
