"""Run the biofeedback API server."""
import argparse

import uvicorn

from biofeedback.config import AppConfig, configure_logging, get_config, set_config


def main():
    config = get_config()

    parser = argparse.ArgumentParser(description="Biofeedback API Server")
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--config", help="Path to config file (JSON)")
    args = parser.parse_args()

    if args.config:
        config = AppConfig.from_file(args.config)
        set_config(config)

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    host = args.host or config.api.host
    port = args.port or config.api.port
    log_level = args.log_level or config.api.log_level

    configure_logging(log_level)

    uvicorn.run(
        "biofeedback.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
