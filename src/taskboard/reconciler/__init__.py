"""Optimistic reconciler - merges authoritative snapshots with unconfirmed local moves."""

from taskboard.reconciler.reconciler import OptimisticReconciler, ReconcileStats, reconcile_task

__all__ = [
    "OptimisticReconciler",
    "ReconcileStats",
    "reconcile_task",
]
