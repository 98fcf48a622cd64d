#!/usr/bin/env python
"""
Launch the wedding budget page with Streamlit.

Extra arguments are passed to `streamlit run` unchanged, e.g.

    python scripts/run_app.py --server.port 8600 --server.headless true
"""
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
UI_PATH = SRC_PATH / "wedding_budget" / "ui" / "app_streamlit.py"


def build_command(extra_args: list[str]) -> list[str]:
    """`streamlit run` invocation for the page, followed by any extra flags."""
    return [sys.executable, "-m", "streamlit", "run", str(UI_PATH), *extra_args]


def build_env(log_level: str) -> dict[str, str]:
    """Child environment with src importable and the page's log level set."""
    env = os.environ.copy()
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = f"{SRC_PATH}{os.pathsep}{existing}" if existing else str(SRC_PATH)
    env["WEDDING_BUDGET_LOG_LEVEL"] = log_level
    # Keep Streamlit's own logger in step with ours unless the caller set it
    env.setdefault("STREAMLIT_LOGGER_LEVEL", log_level.lower())
    return env


def main(argv: list[str] = None) -> int:
    if str(SRC_PATH) not in sys.path:
        sys.path.insert(0, str(SRC_PATH))
    from wedding_budget.config import get_settings
    settings = get_settings()

    cmd = build_command(sys.argv[1:] if argv is None else argv)
    print(f"Starting Wedding Budget page (log level {settings.log_level}): {' '.join(cmd)}")

    try:
        return subprocess.run(cmd, cwd=str(PROJECT_ROOT), env=build_env(settings.log_level)).returncode
    except KeyboardInterrupt:
        print("\nPage stopped.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
