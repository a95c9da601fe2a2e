#!/usr/bin/env python3
"""
MedHistory — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --config config.yaml
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='MedHistory API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--config', default=None, help='YAML config (export/import settings)')

    args = parser.parse_args()

    print("=" * 60)
    print("🏥 MedHistory — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Config: {args.config or 'default'}")
    print("=" * 60)

    # APIConfig читає ці змінні при імпорті додатку
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)
    if args.config:
        os.environ["MED_HISTORY_CONFIG"] = str(Path(args.config).resolve())

    import uvicorn

    # Запускаємо сервер (одна сесія форм на процес)
    uvicorn.run(
        "med_history.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
