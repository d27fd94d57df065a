from .cleaning import CleaningRecord, MAX_CLEANERS, MIN_CLEANERS, is_complete, total_hours

__all__ = ["CleaningRecord", "MAX_CLEANERS", "MIN_CLEANERS", "is_complete", "total_hours"]
