#!/usr/bin/env python3
"""
MedHistory — Запуск форми анамнезу (Streamlit)

Форма працює поверх MedHistory API; адреса API передається формі
через MED_HISTORY_API_URL.

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --api-url http://127.0.0.1:8080
    python scripts/run_web.py --start-api          # API + форма разом
"""

import os
import sys
import time
import subprocess
import argparse
from pathlib import Path
from urllib.parse import urlparse

# Шлях до проекту
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

form_path = project_root / "med_history" / "web_ui" / "app.py"


def form_env(api_url: str) -> dict:
    """Оточення для Streamlit: адреса API + корінь проекту в PYTHONPATH"""
    env = dict(os.environ)
    env["MED_HISTORY_API_URL"] = api_url.rstrip("/")
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(project_root), env.get("PYTHONPATH", "")] if p
    )
    return env


def streamlit_command(host: str, port: int) -> list:
    return [
        sys.executable, "-m", "streamlit", "run",
        str(form_path),
        "--server.port", str(port),
        "--server.address", host,
        "--browser.gatherUsageStats", "false",
    ]


def api_command(api_url: str) -> list:
    """uvicorn для адреси з --api-url"""
    parsed = urlparse(api_url)
    return [
        sys.executable, "-m", "uvicorn", "med_history.api.app:app",
        "--host", parsed.hostname or "127.0.0.1",
        "--port", str(parsed.port or 8000),
    ]


def wait_for_api(api_url: str, timeout: float = 15.0) -> bool:
    """Чекати, поки /health не відповість"""
    from med_history.web_ui.client import HistoryAPIClient

    client = HistoryAPIClient(base_url=api_url)
    deadline = time.time() + timeout
    while time.time() < deadline:
        if client.is_online():
            return True
        time.sleep(0.5)
    return False


def main():
    parser = argparse.ArgumentParser(description='MedHistory form (Streamlit)')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--api-url', default='http://localhost:8000', help='MedHistory API URL')
    parser.add_argument('--start-api', action='store_true', help='Start the API server as well')

    args = parser.parse_args()

    print("=" * 60)
    print("🏥 MedHistory — Past History form")
    print("=" * 60)
    print(f"   Form: http://{args.host}:{args.port}")
    print(f"   API:  {args.api_url}{' (started here)' if args.start_api else ''}")
    print("=" * 60)

    api_process = None
    if args.start_api:
        api_process = subprocess.Popen(api_command(args.api_url), cwd=str(project_root))

    try:
        if not wait_for_api(args.api_url, timeout=15.0 if args.start_api else 2.0):
            print(f"⚠️  API не відповідає: {args.api_url}")
            print("    Запустіть: python scripts/run_api.py  (або додайте --start-api)")
            if api_process is not None:
                sys.exit(1)

        print("🚀 Запуск Streamlit...")
        subprocess.run(streamlit_command(args.host, args.port), env=form_env(args.api_url))
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")
    finally:
        if api_process is not None:
            api_process.terminate()
            api_process.wait()


if __name__ == "__main__":
    main()
