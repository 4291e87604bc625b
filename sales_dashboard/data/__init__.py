"""Data loading, cleaning, filtering and the in-memory record store."""
from .loader import load_records, parse_csv_text, read_rows
from .store import RecordStore
from .schemas import CleanReport, FilterCriteria, Record
from .normalize import clean_rows
from .filters import apply_filters
