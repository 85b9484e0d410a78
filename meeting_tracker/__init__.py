from flask import Flask, current_app

from .store import MeetingStore


def get_store():
    """Returns the meeting collection of the current application."""
    return current_app.extensions['meeting_store']


def create_app(config_class='config.Config'):
    """
    Application Factory Function
    """

    app = Flask(__name__, instance_relative_config=True)

    # Load configuration from the config.py file
    app.config.from_object(config_class)

    # Meetings only live in memory; nothing survives a restart
    from .services.excel import sample_meetings
    seed = sample_meetings() if app.config.get('SEED_SAMPLE_MEETINGS') else []
    app.extensions['meeting_store'] = MeetingStore(seed)

    # Register Blueprints
    # Imports are *inside* the factory to avoid circular import issues
    with app.app_context():
        from .meetings_routes import meetings_bp

        app.register_blueprint(meetings_bp)

    # Register CLI commands
    from .commands.excel import import_meetings, export_meetings, sample_template

    app.cli.add_command(import_meetings)
    app.cli.add_command(export_meetings)
    app.cli.add_command(sample_template)

    return app
