"""Allows `python -m contacts_api` to start the server."""

from contacts_api.main import run

if __name__ == "__main__":
    run()
