from __future__ import annotations

from enum import Enum


class HistoryActionType(str, Enum):
    MEMO_ADD = "memo_add"
    MEMO_EDIT = "memo_edit"
    INFO_UPDATE = "info_update"


class ReportPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
