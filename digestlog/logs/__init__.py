# -*- coding: utf-8 -*-
"""Log entries domain (models, SQLite storage, HTTP endpoints)."""
