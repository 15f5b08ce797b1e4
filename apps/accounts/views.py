from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.exceptions import UnauthorizedError
from .permissions import IsAdminSession
from .serializers import (
    UserNameInputSerializer,
    PinLoginInputSerializer,
    ResetPinInputSerializer,
    AdminLoginInputSerializer,
    UserSerializer,
    PinLoginResponseSerializer,
    AdminLoginResponseSerializer,
)
from . import services


class UserViewSet(viewsets.ViewSet):
    """
    Identity registry endpoints.

    list: All users (open, for the user-selection screen)
    retrieve: One user
    create: Register a user on the default PIN (admin)
    partial_update: Rename a user (admin)
    destroy: Remove a user; their tab and history rows stay (admin)
    login: PIN login
    reset_pin: Self-service PIN change
    restore_pin: Put a user back on the default PIN (admin)
    """

    lookup_value_regex = r'\d+'
    admin_actions = ['create', 'partial_update', 'destroy', 'restore_pin']

    def get_permissions(self):
        """Registry mutations need an admin session."""
        if self.action in self.admin_actions:
            return [IsAdminSession()]
        return [AllowAny()]

    @extend_schema(responses={200: UserSerializer(many=True)}, tags=['users'])
    def list(self, request):
        users = services.list_users()
        return Response(UserSerializer(users, many=True).data)

    @extend_schema(responses={200: UserSerializer}, tags=['users'])
    def retrieve(self, request, pk=None):
        user = services.get_user_by_id(int(pk))
        return Response(UserSerializer(user).data)

    @extend_schema(request=UserNameInputSerializer, responses={201: UserSerializer}, tags=['users'])
    def create(self, request):
        serializer = UserNameInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.create_user(name=serializer.validated_data['name'])
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UserNameInputSerializer, responses={200: UserSerializer}, tags=['users'])
    def partial_update(self, request, pk=None):
        serializer = UserNameInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.rename_user(user_id=int(pk), name=serializer.validated_data['name'])
        return Response(UserSerializer(user).data)

    @extend_schema(responses={204: None}, tags=['users'])
    def destroy(self, request, pk=None):
        services.delete_user(user_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=PinLoginInputSerializer,
        responses={
            200: PinLoginResponseSerializer,
            400: PinLoginResponseSerializer,
            401: PinLoginResponseSerializer,
        },
        description="Log in with a 4-digit PIN. mustResetPin tells the client to force a PIN change.",
        tags=['users'],
    )
    @action(detail=False, methods=['post'])
    def login(self, request):
        """
        PIN login.

        POST /api/users/login
        Body: {"pin": "1234", "userId": 3}
        """
        serializer = PinLoginInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'success': False, 'message': 'Invalid input.', 'errors': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            user = services.login_with_pin(**serializer.validated_data)
        except UnauthorizedError as e:
            return Response(
                {'success': False, 'message': str(e)},
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response({
            'success': True,
            'user': UserSerializer(user).data,
            'mustResetPin': user.must_reset_pin,
        })

    @extend_schema(request=ResetPinInputSerializer, responses={200: UserSerializer}, tags=['users'])
    @action(detail=True, methods=['post'], url_path='reset-pin')
    def reset_pin(self, request, pk=None):
        """
        Replace the default PIN with a personal one.

        POST /api/users/{id}/reset-pin
        Body: {"newPin": "1234", "confirmPin": "1234"}
        """
        serializer = ResetPinInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = services.reset_pin(user_id=int(pk), **serializer.validated_data)
        return Response(UserSerializer(user).data)

    @extend_schema(request=None, responses={200: UserSerializer}, tags=['users'])
    @action(detail=True, methods=['post'], url_path='restore-pin')
    def restore_pin(self, request, pk=None):
        """
        Forgotten PIN: back to 0000 with a forced reset.

        POST /api/users/{id}/restore-pin
        """
        user = services.restore_default_pin(user_id=int(pk))
        return Response(UserSerializer(user).data)


@extend_schema(
    request=AdminLoginInputSerializer,
    responses={200: AdminLoginResponseSerializer, 401: AdminLoginResponseSerializer},
    description="Exchange the administrator password for an admin session token.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def admin_login(request):
    """Administrator login."""
    serializer = AdminLoginInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        token = services.authenticate_admin(password=serializer.validated_data['password'])
    except UnauthorizedError as e:
        return Response(
            {'success': False, 'message': str(e)},
            status=status.HTTP_401_UNAUTHORIZED
        )

    return Response({'success': True, 'token': token})
