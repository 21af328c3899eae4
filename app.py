"""Punch clock entry point.

Run the terminal with ``flask --app app terminal`` or ``python app.py terminal``.
"""

from flask.cli import FlaskGroup

from src.punch_clock.punch_clock.main import create_app

cli = FlaskGroup(create_app=create_app)


if __name__ == "__main__":
    cli()
