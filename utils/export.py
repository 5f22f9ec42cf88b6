import csv
import io
import json


def to_csv(rows, columns) -> str:
    """
    columns: list of (header, getter) pairs; getter receives the row.
    None becomes an empty cell, dicts/lists are JSON encoded.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([header for header, _ in columns])
    for row in rows:
        values = []
        for _, getter in columns:
            value = getter(row)
            if value is None:
                value = ""
            elif isinstance(value, (dict, list)):
                value = json.dumps(value)
            values.append(value)
        writer.writerow(values)
    return buf.getvalue()
