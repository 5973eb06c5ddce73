"""
Per-client rate limiting for the API routes (Flask-Limiter).

Counters live in ``RATELIMIT_STORAGE_URI``: ``memory://`` by default, which
limits per worker process, or ``redis://...`` to share them between workers.
Expired windows are dropped by the storage backend.
"""
from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)


def api_limit():
    """RATE_LIMIT_MAX requests per RATE_LIMIT_WINDOW seconds, read at request time."""
    cfg = current_app.config
    return f"{cfg['RATE_LIMIT_MAX']} per {cfg['RATE_LIMIT_WINDOW']} second"


def limits_disabled():
    return not current_app.config.get('RATE_LIMIT_ENABLED', True)
