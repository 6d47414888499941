import click

from json_server import __version__, create_app, echo_resources
from json_server.config import Config
from json_server.storage import ConfigError


@click.group()
def main():
    """Serve the top-level keys of a JSON file as a REST API."""


@main.command()
@click.option("-f", "--file", "db_file", default=Config.DB_FILE, show_default=True, help="File to watch")
@click.option("-p", "--port", default=Config.PORT, show_default=True, type=int, help="Port the server will listen to")
@click.option("-l", "--logs", is_flag=True, default=Config.LOGS, help="Enable request logs")
@click.option("--host", default=Config.HOST, show_default=True, help="Interface to bind")
@click.option("--debug", is_flag=True, default=False, help="Run with the Werkzeug debugger")
def start(db_file, port, logs, host, debug):
    """Start the REST API server for every resource in the file."""
    try:
        app = create_app(Config, DB_FILE=db_file, PORT=port, LOGS=logs, HOST=host)
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo("JSON Server successfully running\n")
    echo_resources(app)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=debug)


@main.command()
def version():
    """Print the json-server version."""
    click.echo(f"json-server {__version__}")


if __name__ == "__main__":
    main()
