from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge
from config import Config
import logging
import os

db = SQLAlchemy()


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    db.init_app(app)
    CORS(app)

    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    # Import models so create_all sees them
    from models.Report import Report
    from services.report_store import ReportStore, ValidationError, NotFoundError

    with app.app_context():
        db.create_all()

    app.extensions['report_store'] = ReportStore(db.session, app.config['UPLOAD_FOLDER'])

    from routes import main as main_blueprint
    app.register_blueprint(main_blueprint)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return jsonify({'error': str(e)}), 404

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return jsonify({'error': 'Uploaded photo is too large'}), 413

    return app

