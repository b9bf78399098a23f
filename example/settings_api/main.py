"""
Settings API example - minimal configuration.

Usage:
    FIELDGRAPH_CONFIG=example/settings_api/fieldgraph.yaml \
    DATABASE_URL=sqlite+aiosqlite:///./settings.db \
        uvicorn example.settings_api.main:app
"""

from fieldgraph import create_app

app = create_app()
