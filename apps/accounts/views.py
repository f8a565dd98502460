from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import User
from .permissions import IsAdminRole
from .serializers import (
    UserLoginSerializer,
    UserSerializer,
    PasswordResetSerializer,
)
from .services import authenticate_user, issue_tokens, reset_user_password
from .exceptions import InvalidCredentialsError, InactiveAccountError


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: MessageResponseSerializer,
        401: MessageResponseSerializer,
        403: MessageResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        raise AuthenticationFailed(str(e))
    except InactiveAccountError as e:
        raise PermissionDenied(str(e))

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': issue_tokens(user),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    responses={200: UserSerializer(many=True)},
    description="List every user, newest first. Admin only.",
    tags=['users'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def list_users(request):
    users = User.objects.order_by('-created_at')
    return Response(UserSerializer(users, many=True).data)


@extend_schema(
    request=PasswordResetSerializer,
    responses={
        200: MessageResponseSerializer,
        400: MessageResponseSerializer,
        404: MessageResponseSerializer,
    },
    description="Set a new password for another user. Admin only.",
    tags=['users'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def reset_password(request, pk):
    serializer = PasswordResetSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = reset_user_password(
        user_id=pk,
        new_password=serializer.validated_data['new_password'],
        password_hint=serializer.validated_data.get('password_hint'),
    )

    return Response(
        {'message': f'Password reset for {user.username}'},
        status=status.HTTP_200_OK
    )
