from .review_scheduler import ReviewScheduler, review_day

__all__ = ["ReviewScheduler", "review_day"]
