import argparse

from .server import run


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Praise Board server")
    parser.add_argument("--host", type=str, default=None, help="Interface to bind (default from settings)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default from settings)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()
    run(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
