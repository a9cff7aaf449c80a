"""Module entrypoint for the banking-day CLI.

Run:
  python -m fedbankday next 2020-02-14T12:00:00Z
"""

from __future__ import annotations

from .main import main


if __name__ == "__main__":
    main()
