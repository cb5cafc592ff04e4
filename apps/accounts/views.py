from rest_framework import status, serializers, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from apps.bookings.serializers import BookingSerializer
from .permissions import IsAdminRole
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    UserWithStatsSerializer,
    UserUpdateSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    list_users_with_stats,
    get_user_with_bookings,
    update_user,
    delete_user,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
)


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


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    error = serializers.JSONField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        raise ValidationError({'username': [str(e)]})

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
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
        return Response({
            'message': str(e),
            'error': 'invalid_credentials',
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({
            'message': str(e),
            'error': 'inactive_account',
        }, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


class UserAdminViewSet(viewsets.ViewSet):
    """
    Admin user management.

    list: All users with booking_count / total_amount
    retrieve: One user with their bookings
    partial_update / update: Change username or role
    destroy: Delete a user and their bookings
    """

    permission_classes = [IsAuthenticated, IsAdminRole]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(responses={200: UserWithStatsSerializer(many=True)}, tags=['users'])
    def list(self, request):
        users = list_users_with_stats()
        return Response(UserWithStatsSerializer(users, many=True).data)

    @extend_schema(tags=['users'])
    def retrieve(self, request, pk=None):
        try:
            user, bookings = get_user_with_bookings(user_id=pk)
        except UserNotFoundError:
            raise NotFound('User not found')
        return Response({
            'user': UserSerializer(user).data,
            'bookings': BookingSerializer(bookings, many=True).data,
        })

    @extend_schema(request=UserUpdateSerializer, responses={200: UserSerializer}, tags=['users'])
    def update(self, request, pk=None):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            user = update_user(user_id=pk, **serializer.validated_data)
        except UserNotFoundError:
            raise NotFound('User not found')
        except DuplicateUsernameError as e:
            raise ValidationError({'username': [str(e)]})
        return Response(UserSerializer(user).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(responses={200: MessageResponseSerializer}, tags=['users'])
    def destroy(self, request, pk=None):
        try:
            delete_user(user_id=pk)
        except UserNotFoundError:
            raise NotFound('User not found')
        return Response({'message': 'User and associated bookings deleted successfully'})
