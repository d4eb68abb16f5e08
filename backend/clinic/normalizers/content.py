def normalize_row(row):
    """Default mapper: every column, timestamps as ISO strings."""
    return row.to_dict()
