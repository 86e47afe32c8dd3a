import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    DEBUG = os.getenv("FLASK_DEBUG", "1") == "1"
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "postgresql://postgres@localhost:5432/cloudbillr")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "change_me")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Sessions
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change_me_too")
    JWT_ALGORITHM = "HS256"
    SESSION_EXPIRATION_DAYS = int(os.getenv("SESSION_EXPIRATION_DAYS", 7))
    AUTH_COOKIE_NAME = "auth-token"
    AUTH_COOKIE_SECURE = os.getenv("AUTH_COOKIE_SECURE", "0" if DEBUG else "1") == "1"
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))
    PASSWORD_RESET_EXPIRATION_MINUTES = 60

    # Mail
    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", 587))
    MAIL_USE_TLS = True
    MAIL_USERNAME = os.getenv("MAIL_USERNAME")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", "CloudBillr <no-reply@cloudbillr.local>")
    CONTACT_RECIPIENT = os.getenv("CONTACT_RECIPIENT", "support@cloudbillr.local")

    # GSTIN verification (AppyFlow); "mock" or unset serves sample data
    GST_API_KEY = os.getenv("GST_API_KEY")
    GST_API_URL = os.getenv("GST_API_URL", "https://appyflow.in/api/verifyGST")
    GST_API_TIMEOUT = 30

    BASE_URL = os.getenv("BASE_URL", "http://localhost:5000")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")
