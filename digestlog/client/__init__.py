# -*- coding: utf-8 -*-
"""Client application: API client, dashboard data, view state and CLI."""
