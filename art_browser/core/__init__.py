"""
Core domain layer: records, dataset, decade filtering, aggregation,
view state, view base class, view registry and the view controller
"""

from .dataset import Dataset
from .records import Record
from .view_state import ViewState
from .base_view import BaseView
from .view_registry import ViewRegistry
from .controller import ViewController

__all__ = ["Dataset", "Record", "ViewState", "BaseView", "ViewRegistry", "ViewController"]
