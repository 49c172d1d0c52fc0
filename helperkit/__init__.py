"""Small, stateless helpers for strings, numbers, dates and collections."""

from .numbers import ordinal, to_words
from .utils.date_utils import add_working_days, is_working_day

__all__ = ["add_working_days", "is_working_day", "ordinal", "to_words"]
