"""Blueprint registrations for application routes."""

from flask import Flask

from .detect import blueprint as detect_blueprint
from .languages import blueprint as languages_blueprint
from .translate import blueprint as translate_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(translate_blueprint)
    app.register_blueprint(detect_blueprint)
    app.register_blueprint(languages_blueprint)
