from django.contrib.auth import get_user_model
from rest_framework_simplejwt.tokens import AccessToken
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

User = get_user_model()


class JWTAuthenticationMiddleware:
    """
    Middleware to handle JWT authentication for plain Django views.
    The token is read from an ``Authorization: Bearer`` header or the
    ``access_token`` cookie and sets the user accordingly.

    Only header tokens bypass CSRF checks; a cookie is sent by the browser
    on cross-site requests, so cookie-authenticated writes still need a
    CSRF token.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        token = None
        from_header = False
        auth_header = request.META.get('HTTP_AUTHORIZATION', '')
        if auth_header.startswith('Bearer '):
            token = auth_header[len('Bearer '):].strip()
            from_header = True
        if not token:
            token = request.COOKIES.get('access_token')
            from_header = False

        if token and not request.user.is_authenticated:
            try:
                access_token = AccessToken(token)
                request.user = User.objects.get(id=access_token['user_id'], is_active=True)
                if from_header:
                    request._dont_enforce_csrf_checks = True
            except (InvalidToken, TokenError, KeyError, User.DoesNotExist):
                # Token is invalid, leave user as anonymous
                pass

        response = self.get_response(request)
        return response
