"""
Status Detector
compass/pipelines/status.py

Flags closed and acquired companies with a display label:

    "closed"                          -> "Closed MM/YYYY"          (Closed Date)
    "acquired" or an acquirer named   -> "Acquired by X MM/YYYY"   (Exit Date)

An unparseable date drops the MM/YYYY suffix. Any other status yields None.
"""

from __future__ import annotations

from typing import Optional

from compass.models.company import AcquisitionStatus, RawRecord
from compass.models.enumerations import StatusTag
from compass.pipelines.utils import format_month_year


def detect_status(record: RawRecord) -> Optional[AcquisitionStatus]:
    status = (record.operating_status or "").strip().lower()
    acquirer = (record.acquired_by or "").strip()

    if status == "closed":
        label = f"Closed {format_month_year(record.closed_date)}".strip()
        return AcquisitionStatus(label=label, color_tag=StatusTag.CLOSED)

    # A single stray character is not an acquirer name
    if status == "acquired" or len(acquirer) > 1:
        by_part = f" by {acquirer}" if acquirer else ""
        label = f"Acquired{by_part} {format_month_year(record.exit_date)}".strip()
        return AcquisitionStatus(label=label, color_tag=StatusTag.ACQUIRED)

    return None
