import json

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def parse_request_data(request):
    """
    Return the submitted fields of a JSON or form-encoded request.

    Raises ValueError when a JSON body cannot be decoded.
    """
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        try:
            data = json.loads(request.body)
        except json.JSONDecodeError as e:
            raise ValueError(f'Invalid JSON body: {e}')
        if not isinstance(data, dict):
            raise ValueError('JSON body must be an object')
        return data
    return request.POST


def is_truthy(value):
    if isinstance(value, bool):
        return value
    return str(value or '').strip().lower() in TRUE_VALUES
