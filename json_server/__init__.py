import click
from flask import Flask
from .config import Config
from .extensions import cors, load_resources
from .filters import register_filters
from .request_log import init_request_logging
from .web import register_error_handlers

__version__ = "1.0.0"


def create_app(config_class: type[Config] = Config, **overrides):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config_class)
    app.config.update(overrides)
    app.json.sort_keys = False

    # Extensions
    origins = app.config.get("CORS_ORIGINS", "*")
    cors.init_app(app, origins=origins, send_wildcard=origins == "*")
    resources = load_resources(app)

    # Filters
    register_filters(app)
    app.jinja_env.globals["version"] = __version__

    # Logging / errors
    init_request_logging(app)
    register_error_handlers(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.resources import resource_blueprint

    app.register_blueprint(pages_bp)
    for index, (key, store) in enumerate(resources.stores.items()):
        app.register_blueprint(resource_blueprint(key, store, index))

    register_commands(app)
    return app


def register_commands(app: Flask):
    @app.cli.command("resources")
    def resources_command():
        """Print the URL of every discovered resource."""
        echo_resources(app)

    @app.cli.command("version")
    def version_command():
        """Print the json-server version."""
        click.echo(f"json-server {__version__}")


def echo_resources(app: Flask):
    """Print resource, /db and home page URLs for the configured port."""
    port = app.config.get("PORT", 3000)
    resources = app.extensions["json_server"]
    click.echo("Resources")
    for key, store in resources.stores.items():
        click.echo(f"http://localhost:{port}/{key} ({store.kind.value})")
    click.echo(f"http://localhost:{port}/db")
    click.echo("")
    click.echo("Home")
    click.echo(f"http://localhost:{port}")
