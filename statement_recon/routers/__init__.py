# statement_recon/routers/__init__.py

from statement_recon.routers import health
from statement_recon.routers import reconcile

__all__ = ["health", "reconcile"]
