from flask import Flask, session, request
from flask_wtf.csrf import CSRFProtect
from flask_babel import Babel

from pwstrength.ratelimit import limiter

csrf = CSRFProtect()
babel = Babel()


def get_locale():
    return session.get('lang', request.accept_languages.best_match(['en', 'fr']) or 'en')


def create_app(config_object='pwstrength.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize extensions
    csrf.init_app(app)
    babel.init_app(app, locale_selector=get_locale)
    limiter.init_app(app)

    # Register blueprints
    from .routes import main as main_blueprint
    app.register_blueprint(main_blueprint)

    return app
