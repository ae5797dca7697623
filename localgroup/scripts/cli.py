"""
A simple CLI for running the admission server.
"""

import sys

import uvicorn


def main():
    try:
        run = sys.argv[1] == "run"
    except IndexError:
        run = False

    if not run:
        print("Only supported command is localgroup run")
        exit(1)

    from localgroup.config.settings import Settings

    settings = Settings()

    if settings.database_type == "sqlite":
        settings.sync_manager().create_all()

    uvicorn.run(
        "localgroup.api.app:app", host=settings.api_host, port=settings.api_port
    )
