# core/settings.py
from pathlib import Path
import os
from dotenv import load_dotenv

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# ==== Paths & env ====
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# ==== Sentry ====

sentry_sdk.init(
    dsn=os.getenv("SENTRY_DSN"),
    integrations=[
        DjangoIntegration(),
        LoggingIntegration(
            level="ERROR",
            event_level="ERROR",
        ),
    ],
    environment=os.getenv("ENVIRONMENT", "production"),
    send_default_pii=False,
)

# ==== Security / environment ====
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
DEBUG = os.getenv("DEBUG", "True").lower() == "true"
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "127.0.0.1,localhost").split(",")
SITE_URL = os.getenv("SITE_URL", "https://numtoword.ai")

# ==== Apps ====
INSTALLED_APPS = [
    # Django
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "django.contrib.humanize",
    # Project apps
    "common",
    "converter.apps.ConverterConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

# ==== Templates ====
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "core.wsgi.application"

# ==== Database ====
# Nothing is persisted server side; the recently viewed list lives in a signed cookie.
DATABASES = {}
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
RECENTLY_VIEWED_LIMIT = int(os.getenv("RECENTLY_VIEWED_LIMIT", "10"))

# ==== Internationalization ====
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ==== Static files ====
STATIC_URL = "/static/"
STATICFILES_DIRS = [BASE_DIR / "static"]      # development
STATIC_ROOT = BASE_DIR / "staticfiles"        # collectstatic in prod
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedStaticFilesStorage"},
}

# Output of `manage.py render_numbers`
STATIC_PAGES_DIR = os.getenv("STATIC_PAGES_DIR", str(BASE_DIR / "prerendered"))

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_COOKIES = os.getenv("SECURE_COOKIES", "false" if DEBUG else "true").lower() == "true"
CSRF_COOKIE_SECURE = SECURE_COOKIES
SESSION_COOKIE_SECURE = SECURE_COOKIES

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ==== Logging ====
LOG_DIR = os.getenv("LOG_DIR", str(BASE_DIR / "logs"))
os.makedirs(LOG_DIR, exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": f"{LOG_DIR}/django.log",
            "maxBytes": 50 * 1024 * 1024,
            "backupCount": 10,
            "formatter": "verbose",
            "level": "INFO",
        },
    },
    "loggers": {
        # 500s with traceback
        "django.request": {
            "handlers": ["console", "file"],
            "level": "ERROR",
            "propagate": False,
        },
        "django.server": {
            "handlers": ["console", "file"],
            "level": "INFO",
            "propagate": False,
        },
        "converter": {
            "handlers": ["console", "file"],
            "level": os.getenv("CONVERTER_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console", "file"],
        "level": "INFO",
    },
}
