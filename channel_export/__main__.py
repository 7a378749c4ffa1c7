"""Run the channel export HTTP API: python -m channel_export"""

import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Serve the YouTube channel export API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    args = parser.parse_args()

    uvicorn.run("channel_export.api:app", host=args.host, port=args.port)


if __name__ == '__main__':
    main()
