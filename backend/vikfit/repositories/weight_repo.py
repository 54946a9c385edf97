from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import select

from vikfit.dates import parse_date
from vikfit.models import WeightEntry
from vikfit.repositories.base import BaseRepository

class WeightRepository(BaseRepository[WeightEntry]):
    model = WeightEntry

    # READS
    def get_for_date(self, weight_date: date | str) -> Optional[WeightEntry]:
        stmt = select(WeightEntry).where(WeightEntry.weight_date == parse_date(weight_date))
        return self.db.execute(stmt).scalar_one_or_none()

    def between(self, start: date | str, end: date | str) -> list[WeightEntry]:
        start, end = parse_date(start), parse_date(end)

        def query() -> list[WeightEntry]:
            stmt = select(WeightEntry).where(
                WeightEntry.weight_date >= start, WeightEntry.weight_date <= end,
            ).order_by(WeightEntry.weight_date.asc())
            return list(self.db.execute(stmt).scalars().all())
        return self.soft_read("weight_entries_between", query, default=list)

    def latest(self) -> Optional[WeightEntry]:
        def query() -> Optional[WeightEntry]:
            stmt = select(WeightEntry).order_by(WeightEntry.weight_date.desc()).limit(1)
            return self.db.execute(stmt).scalar_one_or_none()
        return self.soft_read("latest_weight_entry", query, default=lambda: None)

    # WRITES
    def record(self, weight_date: date | str, *, current_weight: float,
               target_weight: float) -> WeightEntry:
        """One entry per day; recording the same day again overwrites it."""
        weight_date = parse_date(weight_date)

        def work() -> WeightEntry:
            entry = self.get_for_date(weight_date)
            if entry is None:
                entry = WeightEntry(weight_date=weight_date, current_weight=current_weight,
                                    target_weight=target_weight)
                self.db.add(entry)
            else:
                entry.current_weight = current_weight
                entry.target_weight = target_weight
            self.db.flush()
            self.db.refresh(entry)
            return entry
        return self.write("record_weight", work)

    def delete(self, weight_date: date | str) -> bool:
        entry = self.get_for_date(weight_date)
        if not entry:
            return False
        self.write("delete_weight_entry", lambda: self.db.delete(entry))
        return True
