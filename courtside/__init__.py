"""Initialize the Flask app and its extensions."""

import json
import os

import firebase_admin
from firebase_admin import credentials, firestore
from flask import Flask, current_app, g, session

from .core.constants import DEFAULT_FIRESTORE_TIMEOUT, RECENT_FORM_LENGTH
from .directory.services import DirectoryService
from .errors import StorageError
from .extensions import csrf


def _init_firebase(app):
    """Initialize the Firebase Admin SDK from the first credentials found."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    project_id = json.load(f).get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = os.environ.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    if cred and not firebase_admin._apps:
        try:
            options = {"projectId": project_id} if project_id else None
            firebase_admin.initialize_app(cred, options)
        except ValueError:
            # This can happen if the app is already initialized, which is fine.
            app.logger.info("Firebase app already initialized.")


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        FIRESTORE_TIMEOUT=float(
            os.environ.get("FIRESTORE_TIMEOUT") or DEFAULT_FIRESTORE_TIMEOUT
        ),
        RECENT_FORM_LENGTH=int(
            os.environ.get("RECENT_FORM_LENGTH") or RECENT_FORM_LENGTH
        ),
    )

    if test_config:
        app.config.update(test_config)

    # Initialize Firebase Admin SDK only if not in testing mode
    if not app.config.get("TESTING"):
        _init_firebase(app)

    csrf.init_app(app)

    # Register blueprints
    from . import match as match_bp

    app.register_blueprint(match_bp.bp)

    from . import stats as stats_bp

    app.register_blueprint(stats_bp.bp)

    from . import directory as directory_bp

    app.register_blueprint(directory_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.before_request
    def load_logged_in_user():
        """If a user_id is in the session, load the user's player profile into g."""
        user_id = session.get("user_id")
        g.user = None
        if user_id is None:
            return

        try:
            profile = DirectoryService.get_player(firestore.client(), user_id)
            g.user = dict(profile) if profile else {}
            g.user["uid"] = user_id
        except StorageError as e:
            # The profile only supplies the default player name; the session
            # itself stays valid.
            current_app.logger.error(f"Error loading user profile: {e}")
            g.user = {"uid": user_id}

    @app.route("/health")
    def health_check():
        """Perform a simple health check."""
        return "OK", 200

    return app
