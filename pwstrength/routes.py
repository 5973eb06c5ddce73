from flask import Blueprint, current_app, jsonify, request, session
from flask_babel import gettext as _
from flask_wtf.csrf import CSRFError, generate_csrf

from pwstrength.errors import GenerationError, RandomnessUnavailable, ValidationError
from pwstrength.history import HistoryEntry, remember
from pwstrength.models import GeneratorOptions
from pwstrength.password_utils import analyze, generate_with_analysis
from pwstrength.ratelimit import api_limit, limiter, limits_disabled

main = Blueprint('main', __name__)

# Never log request bodies from this blueprint: they carry passwords.


def _disclaimer():
    return _('Educational estimate.')


def _error(message, status):
    return jsonify({'error': message, 'disclaimer': _disclaimer()}), status


# ── Health ────────────────────────────────────────────────────────────────────
@main.route('/api/health')
def health():
    return jsonify({'ok': True, 'disclaimer': _disclaimer(), 'csrf_token': generate_csrf()})


# ── Language Switcher ─────────────────────────────────────────────────────────
@main.route('/api/language/<lang>', methods=['POST'])
def set_language(lang):
    allowed = current_app.config.get('LANGUAGES', {})
    if lang not in allowed:
        return _error(_('Unsupported language.'), 400)
    session['lang'] = lang
    return jsonify({'lang': lang})


# ── Password Strength API ─────────────────────────────────────────────────────
@main.route('/api/analyze', methods=['POST'])
@limiter.limit(api_limit, exempt_when=limits_disabled)
def analyze_api():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error(_('Expected a JSON object with a "password" field.'), 400)

    try:
        analysis = analyze(data.get('password'),
                           max_length=current_app.config['MAX_PASSWORD_LENGTH'])
    except ValidationError as e:
        current_app.logger.info(f"Analyze rejected: {e}")
        return _error(str(e), 400)

    entry = HistoryEntry.from_analysis(analysis)
    session['history'] = remember(session.get('history', []), entry,
                                  current_app.config['HISTORY_LIMIT'])

    payload = analysis.to_dict()
    payload['disclaimer'] = _('Educational estimate. Do not test sensitive passwords.')
    return jsonify(payload)


# ── Generate Password API ─────────────────────────────────────────────────────
@main.route('/api/generate', methods=['POST'])
@limiter.limit(api_limit, exempt_when=limits_disabled)
def generate_api():
    data = request.get_json(silent=True)
    if data is None:
        data = {}

    try:
        options = GeneratorOptions.from_mapping(data)
        result = generate_with_analysis(options)
    except ValidationError as e:
        current_app.logger.info(f"Generate rejected: {e}")
        return _error(str(e), 400)
    except RandomnessUnavailable as e:
        current_app.logger.error(f"Secure randomness unavailable: {e}")
        return _error(_('Secure generation is unavailable on this server.'), 503)
    except GenerationError as e:
        current_app.logger.error(f"Generation failed: {e}")
        return _error(str(e), 500)

    return jsonify({
        'password': result['password'],
        'analysis': result['analysis'].to_dict(),
        'disclaimer': _('Educational estimate. Password not stored.'),
    })


# ── Local History ─────────────────────────────────────────────────────────────
@main.route('/api/history', methods=['GET'])
def history():
    return jsonify({'history': session.get('history', []), 'disclaimer': _disclaimer()})


@main.route('/api/history', methods=['DELETE'])
def clear_history():
    session.pop('history', None)
    return jsonify({'history': [], 'disclaimer': _disclaimer()})


# ── Errors & response hardening ───────────────────────────────────────────────
@main.app_errorhandler(404)
def not_found(e):
    return _error(_('Route not found.'), 404)


@main.app_errorhandler(405)
def method_not_allowed(e):
    return _error(_('Method not allowed.'), 405)


@main.app_errorhandler(413)
def too_large(e):
    return _error(_('Request body too large.'), 413)


@main.app_errorhandler(429)
def too_many_requests(e):
    current_app.logger.warning(f"Rate limit hit on {request.path}: {e.description}")
    return _error(_('Too many requests. Please wait a minute.'), 429)


@main.app_errorhandler(CSRFError)
def csrf_error(e):
    current_app.logger.warning(f"CSRF check failed on {request.path}")
    return _error(e.description, 400)


@main.after_app_request
def harden_response(response):
    response.headers['Cache-Control'] = 'no-store'
    response.headers['X-Content-Type-Options'] = 'nosniff'
    if request.path != '/api/health':
        current_app.logger.info(f"{request.method} {request.path} {response.status_code}")
    return response
