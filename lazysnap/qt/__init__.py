"""Optional PyQt6 host adapter."""

from lazysnap.qt.list_host import QtFrameTicker, QtListViewHost

__all__ = ["QtFrameTicker", "QtListViewHost"]
