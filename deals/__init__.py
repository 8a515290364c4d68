"""Flash deals service.

In-memory registry of time-bounded promotional deals with a small FastAPI
surface for creating, updating, claiming and ending them.
"""

__version__ = "1.0.0"
