from .json_writer import dumps_records, load_records, write_json
from .tabular import records_to_frame, write_csv

__all__ = ["dumps_records", "load_records", "write_json", "records_to_frame", "write_csv"]
