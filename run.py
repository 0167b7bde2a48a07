"""Container entrypoint; PORT and friends are picked up by demo_app.config."""
from demo_app.server import run

if __name__ == "__main__":
    run()
