"""Console entry point: ``callscore-roi-dashboard`` → ``streamlit run app.py``."""

from __future__ import annotations

import sys
from pathlib import Path


def main():
    """Run the Streamlit dashboard."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).parent / "app.py"), *sys.argv[1:]]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
