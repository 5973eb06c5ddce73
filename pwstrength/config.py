import os


def _int_env(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'pwstrength-dev-secret-change-in-production'

    # Boundary checks applied before the core is called
    MAX_PASSWORD_LENGTH = _int_env('MAX_PASSWORD_LENGTH', 128)
    HISTORY_LIMIT       = _int_env('HISTORY_LIMIT', 10)

    # 30 requests per minute per client on /api/analyze and /api/generate
    RATE_LIMIT_ENABLED = os.environ.get('RATE_LIMIT_ENABLED', '1') != '0'
    RATE_LIMIT_MAX     = _int_env('RATE_LIMIT_MAX', 30)
    RATE_LIMIT_WINDOW  = _int_env('RATE_LIMIT_WINDOW', 60)
    # Flask-Limiter: use redis:// to share counters between workers
    RATELIMIT_STORAGE_URI     = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_HEADERS_ENABLED = True

    WTF_CSRF_ENABLED = True
    MAX_CONTENT_LENGTH = 50 * 1024

    # Secure Session Cookies for HTTPS
    SESSION_COOKIE_SECURE   = os.environ.get('SESSION_COOKIE_SECURE', '1') != '0'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    BABEL_DEFAULT_LOCALE = 'en'
    BABEL_DEFAULT_TIMEZONE = 'UTC'
    BABEL_TRANSLATION_DIRECTORIES = 'translations'
    LANGUAGES = {
        'en': 'English',
        'fr': 'Français',
    }


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'pwstrength-test-secret'
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    RATE_LIMIT_MAX = 5
