from functools import wraps
from .message_utils import error_response, permission_error


def jwt_required(view_func):
    """Decorator to require authentication (JWT via middleware or Django session)"""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if request.user.is_authenticated:
            return view_func(request, *args, **kwargs)
        return error_response('Authentication required', status=401)
    return wrapper


def staff_required(view_func):
    """Decorator to require back office access"""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return error_response('Authentication required', status=401)

        if not getattr(request.user, 'can_manage_programs', False):
            return permission_error('access this page')

        return view_func(request, *args, **kwargs)
    return wrapper
