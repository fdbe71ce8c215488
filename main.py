import argparse
import logging
import socket

from polyglot.api_server import run_api_server
from polyglot.config import get_server_config

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')
logger = logging.getLogger("Main")


def get_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('', 0))
        return s.getsockname()[1]


def parse_args(argv=None):
    server_conf = get_server_config()

    parser = argparse.ArgumentParser(description="Polyglot translator proxy server")
    parser.add_argument("--host", default=server_conf['host'])
    parser.add_argument("--port", type=int, default=server_conf['port'])
    parser.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    port = args.port
    if not port or port <= 0:
        port = get_free_port()

    logging.getLogger().setLevel(args.log_level.upper())
    logger.info(f"Starting Polyglot API on http://{args.host}:{port}")

    try:
        run_api_server(args.host, port, log_level=args.log_level)
    except KeyboardInterrupt:
        logger.info("User interrupted.")


if __name__ == "__main__":
    main()
