from __future__ import annotations

from typing import Dict, List, Type

from .base_view import BaseView
from .dataset import Dataset


class ViewRegistry:
    """
    Registry for view classes so the app can build its view buttons dynamically

    Purpose:
    - Decouples the Dash layer from hardcoded view implementations by exposing create(view_id, dataset)
    - Navigation (one button per view) is built from the registered views rather than a hardcoded list

    Design Notes:
    - Stores the subclasses of BaseView, not instances, so that each view is instantiated on demand
      and never holds results from a previous render
    - Enforces invariants:
        * only BaseView subclasses can be registered
        * each view 'id' is unique across the registry
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a BaseView subclass with the registry

        :param view_cls: the subclass of BaseView

        Raises:
            TypeError: if view_cls is not a subclass of BaseView
            ValueError: if a view with same 'id' already exists
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, dataset: Dataset) -> BaseView:
        """
        Instantiate a view for the given view_id.

        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls(dataset)

    def all_classes(self) -> List[Type[BaseView]]:
        """
        Used at UI layer to build navigation elements. Keeps UI fully driven by the registry.
        :return list: the registered view classes, in registration order
        """
        return list(self._views.values())

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views
