"""Flask application factory."""
import traceback
from flask import Flask, jsonify
from commerce.database import init_db


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize database
    init_db(app)

    # Caller identity: load the external user id before each request
    from commerce.middleware import load_identity

    @app.before_request
    def before_request_handler():
        """Load caller identity for each request."""
        load_identity()

    # Error Handlers
    from commerce.exceptions import CommerceError

    @app.errorhandler(CommerceError)
    def handle_commerce_error(error):
        """Render application exceptions as structured JSON failures."""
        if error.status_code >= 500:
            app.logger.error(f"CommerceError [{error.status_code}] {error.kind.value}: {error.message}")
        else:
            app.logger.warning(f"CommerceError [{error.status_code}] {error.kind.value}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'status': 'error', 'kind': 'NotFound', 'message': 'Not Found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'status': 'error', 'kind': 'MethodNotAllowed', 'message': 'Method Not Allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}")
        app.logger.error(f"Traceback: {traceback.format_exc()}")
        return jsonify({'status': 'error', 'kind': 'Internal', 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from commerce.blueprints.products import products_bp
    from commerce.blueprints.orders import orders_bp

    app.register_blueprint(products_bp)
    app.register_blueprint(orders_bp)

    # Register CLI commands
    from commerce.cli_commands import init_cli_commands
    init_cli_commands(app)

    app.logger.info(f"Database: {app.config.get('SQLALCHEMY_DATABASE_URI', '').split('@')[-1]}")

    return app
