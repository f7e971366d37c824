import argparse
from dataclasses import replace

import uvicorn

from gym_api.core.config import settings
from gym_api.main import create_app

def main() -> int:
    ap = argparse.ArgumentParser(description="Run the gym-api HTTP service")
    ap.add_argument("--host", default=settings.host, help="Interface to bind")
    ap.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    ap.add_argument("--db", default=settings.db_path, help="Path to the SQLite database")
    ap.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args()

    run_settings = replace(
        settings,
        host=args.host,
        port=args.port,
        db_path=args.db,
        log_level=args.log_level.upper(),
    )
    uvicorn.run(create_app(run_settings), host=run_settings.host, port=run_settings.port,
                log_level=run_settings.log_level.lower())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
