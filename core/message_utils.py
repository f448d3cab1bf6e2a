"""
JSON response helpers for consistent success/error payloads.

The back office front end shows ``message`` as a toast on success and
``error`` (plus per-field ``errors``) on failure.
"""
from django.http import JsonResponse


def success_response(message, status=200, **payload):
    return JsonResponse({'success': True, 'message': message, **payload}, status=status)


def error_response(message, status=400, **payload):
    return JsonResponse({'success': False, 'error': message, **payload}, status=status)


# Specific message types for common operations
def create_success(entity_name, entity_title=None, **payload):
    """Success response for entity creation"""
    if entity_title:
        return success_response(f'{entity_name} "{entity_title}" has been created successfully.', status=201, **payload)
    return success_response(f'{entity_name} has been created successfully.', status=201, **payload)


def update_success(entity_name, entity_title=None, **payload):
    """Success response for entity updates"""
    if entity_title:
        return success_response(f'{entity_name} "{entity_title}" has been updated successfully.', **payload)
    return success_response(f'{entity_name} has been updated successfully.', **payload)


def delete_success(entity_name, entity_title=None, **payload):
    """Success response for entity deletion"""
    if entity_title:
        return success_response(f'{entity_name} "{entity_title}" has been deleted successfully.', **payload)
    return success_response(f'{entity_name} has been deleted successfully.', **payload)


def not_found_error(entity_name):
    """Error response for entity not found"""
    return error_response(f'{entity_name} not found or has been deleted.', status=404)


def permission_error(action="perform this action"):
    """Error response for permission failures"""
    return error_response(f'You do not have permission to {action}.', status=403)


def operation_failed(action):
    """Generic failure after a datastore error; details stay in the logs"""
    return error_response(f'Failed to {action}', status=500)


# Form validation helpers
def form_validation_error(form):
    """Collapse form errors into one message plus the per-field detail"""
    errors = {field: [str(message) for message in messages] for field, messages in form.errors.items()}
    non_field = errors.get('__all__')
    if non_field:
        message = non_field[0]
    elif len(errors) == 1:
        message = "Please correct the error below."
    else:
        message = f"Please correct the {len(errors)} errors below."
    return error_response(message, status=400, errors=errors)
