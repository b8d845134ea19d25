# statement_recon/services/__init__.py

from statement_recon.services.reconciliation import load_rows, reconcile_rows, run_reconciliation

__all__ = ["load_rows", "reconcile_rows", "run_reconciliation"]
