from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction
import logging
from .models import User, create_audit_log
from .serializers import UserSerializer

# Set up logging
logger = logging.getLogger(__name__)


def _token_payload(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def _request_meta(request):
    return {
        'ip_address': request.META.get('REMOTE_ADDR', 'Unknown'),
        'user_agent': request.META.get('HTTP_USER_AGENT', 'Unknown')[:100],
    }


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    data = request.data
    email = (data.get('email') or '').strip().lower()
    logger.info(f"Registration attempt for email: {email}")

    required_fields = ['email', 'first_name', 'last_name', 'password']
    missing_fields = [field for field in required_fields if not data.get(field)]
    if missing_fields:
        error_msg = f"Missing required fields: {', '.join(missing_fields)}"
        logger.warning(f"Registration failed - {error_msg}")
        return Response({'error': error_msg}, status=status.HTTP_400_BAD_REQUEST)

    if User.objects.filter(email__iexact=email).exists():
        error_msg = 'User with this email already exists'
        logger.warning(f"Registration failed - {error_msg}")
        return Response({'error': error_msg}, status=status.HTTP_400_BAD_REQUEST)

    password = data.get('password')
    try:
        validate_password(password)
    except ValidationError as e:
        logger.warning(f"Registration failed - password validation: {e.messages}")
        return Response({'error': e.messages}, status=status.HTTP_400_BAD_REQUEST)

    with transaction.atomic():
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            phone=data.get('phone') or None,
            company=data.get('company') or None,
        )
    logger.info(f"Registration successful for user: {user.email}")

    return Response({
        'user': UserSerializer(user).data,
        'tokens': _token_payload(user),
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    email = request.data.get('email')
    password = request.data.get('password')

    if not email or not password:
        error_msg = 'Email and password are required'
        logger.warning(f"Login failed - {error_msg}")
        return Response({'error': error_msg}, status=status.HTTP_400_BAD_REQUEST)

    user = authenticate(request, username=email, password=password)
    if user is None:
        logger.warning(f"Login failed - invalid credentials for email: {email}")
        return Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    if not user.is_active:
        logger.warning(f"Login failed - account disabled for email: {email}")
        return Response({'error': 'Account is disabled'}, status=status.HTTP_401_UNAUTHORIZED)

    create_audit_log(
        entity_name='User',
        entity_id=user.external_id,
        action='login',
        changed_by=user,
        diff_data={'user_email': user.email, **_request_meta(request)},
    )
    logger.info(f"Login successful for user: {user.email}")

    return Response({
        'user': UserSerializer(user).data,
        'tokens': _token_payload(user),
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([AllowAny])
def refresh_token(request):
    token_value = request.data.get('refresh')
    if not token_value:
        return Response({'error': 'Refresh token is required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        token = RefreshToken(token_value)
    except TokenError:
        return Response({'error': 'Invalid refresh token'}, status=status.HTTP_401_UNAUTHORIZED)

    return Response({'access': str(token.access_token)}, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    token_value = request.data.get('refresh')
    if not token_value:
        logger.warning("No refresh token provided in logout request")
        return Response({'message': 'Successfully logged out'}, status=status.HTTP_200_OK)

    try:
        token = RefreshToken(token_value)
    except TokenError as e:
        logger.warning(f"Logout with invalid refresh token: {e}")
        return Response({'error': 'Invalid refresh token'}, status=status.HTTP_400_BAD_REQUEST)

    # Token blacklisting is not configured; the token expires on its own
    user = User.objects.filter(id=token['user_id']).first()
    if user is not None:
        create_audit_log(
            entity_name='User',
            entity_id=user.external_id,
            action='logout',
            changed_by=user,
            diff_data={'user_email': user.email, **_request_meta(request)},
        )
        logger.info(f"Logout for user: {user.email}")

    response = Response({'message': 'Successfully logged out'}, status=status.HTTP_200_OK)
    response.delete_cookie('access_token')
    return response


@api_view(['GET', 'PATCH'])
def user_profile(request):
    user = request.user
    if request.method == 'PATCH':
        serializer = UserSerializer(user, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response({'error': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)
        serializer.save()
        logger.info(f"Profile updated for user: {user.email}")
        return Response({'user': serializer.data}, status=status.HTTP_200_OK)

    return Response({'user': UserSerializer(user).data}, status=status.HTTP_200_OK)
