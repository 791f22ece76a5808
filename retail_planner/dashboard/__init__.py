from .app import Dashboard
from .client import ApiError, PlanningApiClient
from .notifications import Notifier, Toast
from .planning_view import PlanningState, PlanningView
from .selection import StoreSelection
from .sku_directory import SkuDirectory, SkuFormError, validate_sku_form
from .store_selector import StoreSelector, UnknownStoreError

__all__ = [
    'Dashboard',
    'ApiError',
    'PlanningApiClient',
    'Notifier',
    'Toast',
    'PlanningState',
    'PlanningView',
    'StoreSelection',
    'SkuDirectory',
    'SkuFormError',
    'validate_sku_form',
    'StoreSelector',
    'UnknownStoreError'
]
