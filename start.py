"""Simple launcher for the graph registry HTTP server.

Equivalent to ``python -m graph_registry``; host and port come from
GR_API_HOST / GR_API_PORT.
"""

from __future__ import annotations

from graph_registry.__main__ import main


if __name__ == "__main__":
    main()
