"""CSV export of the filtered view."""
from .csv_writer import format_cell, generate_filename, to_delimited_text, write_csv
