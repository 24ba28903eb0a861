import subprocess
import sys
from pathlib import Path

from flight_quality.config import load_settings

DASHBOARD_SCRIPT = Path(__file__).resolve().parent / "ui.py"
USAGE = "Usage: python -m app.server [api|ui]"


def run_api():
    """Serves the HTTP API with uvicorn."""
    import uvicorn

    settings = load_settings()
    print(f"Starting API on http://{settings.api_host}:{settings.api_port}")
    uvicorn.run("app.api:app", host=settings.api_host, port=settings.api_port)


def run_dashboard() -> int:
    """Opens the findings dashboard in a streamlit child process; returns its exit code."""
    if not DASHBOARD_SCRIPT.is_file():
        print(f"Dashboard script missing: {DASHBOARD_SCRIPT}")
        return 1

    print(f"Opening flight quality dashboard ({DASHBOARD_SCRIPT.name})")
    result = subprocess.run([sys.executable, "-m", "streamlit", "run", str(DASHBOARD_SCRIPT)])
    if result.returncode != 0:
        print(f"Dashboard stopped with exit code {result.returncode}")
    return result.returncode


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    target = args[0] if args else "api"
    if target == "api":
        run_api()
        return 0
    if target == "ui":
        return run_dashboard()
    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
