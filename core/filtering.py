"""
In-memory list filtering shared by the management screens.

Records are model instances (or any object exposing the named attributes).
Each filter is a predicate; ``apply_filters`` keeps the records matching all
of them and never reorders the input.
"""

ALL = 'all'


def _value(record, field):
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)


def is_unset(value):
    """Empty, None and the 'all' sentinel mean the filter is switched off"""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == '' or value.strip().lower() == ALL
    return False


def text_search(fields, term):
    """Case-insensitive substring match over any of ``fields``"""
    term = (term or '').strip().lower()

    def predicate(record):
        if not term:
            return True
        for field in fields:
            value = _value(record, field)
            if value is not None and term in str(value).lower():
                return True
        return False

    return predicate


def exact_match(field, expected, default=None):
    """Exact categorical match; ``default`` stands in for records without a value"""

    def predicate(record):
        if is_unset(expected):
            return True
        value = _value(record, field)
        if value in (None, ''):
            value = default
        return value == expected

    return predicate


def boolean_match(field, expected, true_value, false_value):
    """Maps a two-valued filter (e.g. published/draft) onto a boolean field"""

    def predicate(record):
        if is_unset(expected):
            return True
        value = bool(_value(record, field))
        if expected == true_value:
            return value
        if expected == false_value:
            return not value
        return True

    return predicate


def apply_filters(records, predicates):
    return [record for record in records if all(predicate(record) for predicate in predicates)]
