"""Application models package."""

from workhours.models.app_setting import AppSetting
from workhours.models.work_order import WorkOrder

__all__ = ["AppSetting", "WorkOrder"]
