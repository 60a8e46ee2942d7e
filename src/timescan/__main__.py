"""Module entrypoint.

Allows:
    python -m timescan
"""

from __future__ import annotations

from timescan.server.timescan_server import main

if __name__ == "__main__":
    main()
