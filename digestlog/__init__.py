# -*- coding: utf-8 -*-
"""digestlog — personal bowel-movement symptom log (API + client)."""

__version__ = "1.0.0"
