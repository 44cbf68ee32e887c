"""Show/dismiss lifecycle for transient surfaces."""

from whatsnew.dismissal.core import DismissalController, DismissalState

__all__ = ["DismissalController", "DismissalState"]
